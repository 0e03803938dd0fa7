import numpy as np
from fourier_transforms.backend import Backend
from fourier_transforms.direct import direct_transform
from fourier_transforms.transforms import as_complex_sequence


class DirectBackend(Backend):
    """O(N^2) transform by definition, for checking the fast ones"""

    name = "direct"

    def fft(self, x):
        x = as_complex_sequence(x)
        return direct_transform(np.empty_like(x), x)
