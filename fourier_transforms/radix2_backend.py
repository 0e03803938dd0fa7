import numpy as np
from fourier_transforms.backend import Backend
from fourier_transforms.kernels import ditfft2
from fourier_transforms.transforms import as_complex_sequence


class Radix2Backend(Backend):
    """Classic radix-2 FFT, power-of-two lengths only"""

    name = "radix2"

    def fft(self, x):
        x = as_complex_sequence(x)
        return ditfft2(np.empty_like(x), x)
