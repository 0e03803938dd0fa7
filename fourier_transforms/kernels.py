import numpy as np
from fourier_transforms.direct import twiddle
from fourier_transforms.errors import PreconditionError, check_same_length


def _check_size(X, x, size):
    N = check_same_length(X, x)
    if N != size:
        raise PreconditionError(f"Kernel expects length {size}. Given: {N}")


def direct_ft_1(X, x):
    _check_size(X, x, 1)
    X[0] = x[0]
    return X


def direct_ft_2(X, x):
    _check_size(X, x, 2)
    a, b = x[0], x[1]
    X[0] = a + b
    X[1] = a - b
    return X


def direct_ft_4(X, x):
    """4 point DFT from two length-2 butterflies, no multiplications"""
    _check_size(X, x, 4)
    even_sum, even_diff = x[0] + x[2], x[0] - x[2]
    odd_sum, odd_diff = x[1] + x[3], x[1] - x[3]
    X[0] = even_sum + odd_sum
    X[1] = even_diff - 1j * odd_diff
    X[2] = even_sum - odd_sum
    X[3] = even_diff + 1j * odd_diff
    return X


def ditfft2(X, x):
    """Radix-2 decimation-in-time FFT, x is not modified.

    The length must be a power of two (or 0).
    """
    N = check_same_length(X, x)
    if N == 0:
        return X
    if N == 1:
        X[0] = x[0]
        return X
    if N % 2 != 0:
        raise PreconditionError(f"FFT size must be power of 2. Given odd length {N}")

    half = N // 2
    ditfft2(X[:half], x[0::2])
    ditfft2(X[half:], x[1::2])

    # Butterfly
    p = X[:half].copy()
    q = twiddle(np.arange(half), 1, N) * X[half:]
    X[:half] = p + q
    X[half:] = p - q
    return X
