import numpy as np
from abc import ABC, abstractmethod


class Backend(ABC):
    name = "base"

    @abstractmethod
    def fft(self, x):
        pass

    def ifft(self, x):
        """1D IFFT using FFT"""
        x = np.asarray(x)
        n = len(x)
        # Conjugate input
        x_conj = np.conj(x)
        # Apply FFT
        result = np.conj(self.fft(x_conj))
        # Conjugate output and normalize
        return result / n if n else result

    def fftfreq(self, n: int, d: float = 1.0) -> np.ndarray:
        """Generate frequency array for FFT"""
        result = np.empty(n)
        for i in range(n):
            if i <= (n - 1) // 2:
                result[i] = i / (n * d)
            else:
                result[i] = (i - n) / (n * d)
        return result

    def abs(self, x):
        return np.abs(x)
