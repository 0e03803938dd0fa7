"""Forward and inverse transforms that never modify their input.

The ``*_into`` variants write into a caller supplied complex array of the
same length and return it; ``fft`` and ``inv_fft`` allocate the result.
Input of any numeric dtype is accepted and promoted to complex.
"""

import logging
import numpy as np
from fourier_transforms.errors import PreconditionError, check_same_length
from fourier_transforms.radix import choose_radix as choose_radix_sqrt
from fourier_transforms.radix import radix_fft

logger = logging.getLogger(__name__)


def as_complex_sequence(x):
    x = np.asarray(x)
    if x.ndim != 1:
        raise PreconditionError(f"Expected a one-dimensional sequence. Given shape: {x.shape}")
    if not np.iscomplexobj(x):
        x = x.astype(complex)
    return x


def _check_output(X, x):
    if not isinstance(X, np.ndarray) or not np.iscomplexobj(X):
        raise PreconditionError(f"Output must be a complex numpy array. Given: {type(X).__name__}")
    check_same_length(X, x)


def fft_into(X, x, choose_radix=choose_radix_sqrt):
    """Fourier transform of x stored into X"""
    x = as_complex_sequence(x)
    _check_output(X, x)
    logger.debug("fft: length %d", len(x))

    work = x.astype(X.dtype, copy=True)
    return radix_fft(X, np.empty_like(work), work, choose_radix=choose_radix)


def fft(x, choose_radix=choose_radix_sqrt):
    x = as_complex_sequence(x)
    return fft_into(np.empty_like(x), x, choose_radix=choose_radix)


def inv_fft_into(X, x, choose_radix=choose_radix_sqrt):
    """Inverse Fourier transform of x stored into X.

    Computed as conj(fft(conj(x))) / N; the conjugate is taken on a
    private copy so x is never touched.
    """
    x = as_complex_sequence(x)
    _check_output(X, x)
    N = len(x)
    logger.debug("inv_fft: length %d", N)

    work = np.conj(x).astype(X.dtype, copy=False)
    radix_fft(X, np.empty_like(work), work, choose_radix=choose_radix)
    np.conj(X, out=X)
    if N:
        X /= N
    return X


def inv_fft(x, choose_radix=choose_radix_sqrt):
    x = as_complex_sequence(x)
    return inv_fft_into(np.empty_like(x), x, choose_radix=choose_radix)
