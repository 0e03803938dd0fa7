import numpy as np
from fourier_transforms.backend import Backend


class NumpyBackend(Backend):
    name = "numpy"

    def fft(self, x):
        return np.fft.fft(x)

    def ifft(self, x):
        return np.fft.ifft(x)

    def fftfreq(self, n, d=1.0):
        return np.fft.fftfreq(n, d)
