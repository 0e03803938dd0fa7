from fourier_transforms.backend import Backend
from fourier_transforms.radix import choose_radix
from fourier_transforms.transforms import fft, inv_fft


class RadixBackend(Backend):
    name = "radix"

    def __init__(self, choose_radix=choose_radix):
        self.choose_radix = choose_radix

    def fft(self, x):
        return fft(x, choose_radix=self.choose_radix)

    def ifft(self, x):
        return inv_fft(x, choose_radix=self.choose_radix)
