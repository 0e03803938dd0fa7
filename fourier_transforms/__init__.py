from fourier_transforms.direct import direct_transform, twiddle
from fourier_transforms.errors import PreconditionError
from fourier_transforms.radix import choose_radix, radix_fft, radix_fft_preserving
from fourier_transforms.transforms import fft, fft_into, inv_fft, inv_fft_into

__all__ = [
    "PreconditionError",
    "choose_radix",
    "direct_transform",
    "fft",
    "fft_into",
    "inv_fft",
    "inv_fft_into",
    "radix_fft",
    "radix_fft_preserving",
    "twiddle",
]
