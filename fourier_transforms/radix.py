import math
import numbers
from itertools import combinations
import numpy as np
from sympy import factorint
from fourier_transforms.direct import direct_transform, twiddle
from fourier_transforms.errors import PreconditionError, check_same_length

SMALL_PRIME_RADICES = (3, 5, 7, 11, 13, 17, 19)


def choose_radix(n: int) -> int:
    """Pick a radix close to (but not above) sqrt(n) that divides n.

    Returns n itself when n <= 1 or when no useful factor exists, which
    sends the caller straight to the direct transform.
    """
    if not isinstance(n, numbers.Integral) or n < 0:
        raise PreconditionError(f"Transform length must be a non-negative integer. Given: {n!r}")
    n = int(n)
    if n <= 1:
        return n

    if n & (n - 1) == 0:
        return 2

    # Odd part of n, i.e. n with its factors of two stripped
    odd = n >> ((n & -n).bit_length() - 1)
    if odd in SMALL_PRIME_RADICES:
        return odd

    # Greedy: largest primes first, each as often as it still fits under sqrt(n)
    counts = factorint(n)
    sqrt_n = math.isqrt(n)
    radix = 1
    for prime in sorted((p for p in counts if p <= sqrt_n), reverse=True):
        for _ in range(counts[prime]):
            if radix * prime <= sqrt_n:
                radix *= prime
            else:
                break

    if radix == 1:
        return n
    return radix


def radix_fft(X, Y, x, choose_radix=choose_radix):
    """Mixed-radix Cooley-Tukey FFT.

    X: output
    Y: workspace
    x: input (will be destroyed)

    All three must have the same length and must not overlap in memory.
    Sub-transforms work on strided views of the same three buffers;
    nothing is copied.
    """
    check_same_length(X, Y, x)
    for (a_name, a), (b_name, b) in combinations((("output", X), ("workspace", Y), ("input", x)), 2):
        if np.shares_memory(a, b):
            raise PreconditionError(f"The {a_name} and {b_name} buffers must not overlap")
    return _radix_fft(X, Y, x, choose_radix)


def _radix_fft(X, Y, x, choose_radix):
    N = len(x)
    radix = choose_radix(N)
    if N == 0:
        return X
    if N <= radix:
        return direct_transform(X, x)

    N1 = radix
    if N1 < 2 or N % N1 != 0:
        raise PreconditionError(f"Radix must be a divisor of the transform length above 1. Given: radix {N1} for length {N}")
    N2 = N // N1

    # Rows of length N2 in Y hold the twiddled sub-transforms of x[n1::N1]
    k2 = np.arange(N2)
    for n1 in range(N1):
        row = slice(n1 * N2, (n1 + 1) * N2)
        _radix_fft(Y[row], X[row], x[n1::N1], choose_radix)
        Y[row] *= twiddle(n1, k2, N)

    # Columns of Y combine into X; x is free to serve as workspace now
    for n2 in range(N2):
        _radix_fft(X[n2::N2], x[n2::N2], Y[n2::N2], choose_radix)

    return X


def radix_fft_preserving(X, x, choose_radix=choose_radix):
    """X will contain the output, x is preserved"""
    check_same_length(X, x)
    work = np.array(x, dtype=X.dtype)
    return radix_fft(X, np.empty_like(work), work, choose_radix=choose_radix)


def radix_fft_inplace(x, choose_radix=choose_radix):
    """x will contain the output; x must be a complex numpy array"""
    if not isinstance(x, np.ndarray) or not np.iscomplexobj(x):
        raise PreconditionError(f"In-place transform needs a complex numpy array. Given: {type(x).__name__}")
    return radix_fft(x, np.empty_like(x), x.copy(), choose_radix=choose_radix)


def radix_fft_copy(x, choose_radix=choose_radix):
    """x is preserved, the output is a new array"""
    x = np.asarray(x)
    if not np.iscomplexobj(x):
        x = x.astype(complex)
    return radix_fft_preserving(np.empty_like(x), x, choose_radix=choose_radix)
