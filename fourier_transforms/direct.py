import numpy as np
from fourier_transforms.errors import check_same_length


def twiddle(a, b, n):
    """exp(-2*pi*i*a*b/n), with a*b reduced mod n first"""
    return np.exp(-2j * np.pi * (np.multiply(a, b) % n) / n)


def direct_transform(X, x):
    """O(N^2) DFT of x written into X"""
    N = check_same_length(X, x)

    # One row of the DFT matrix at a time, so large prime lengths stay O(N) in memory
    n = np.arange(N)
    for k in range(N):
        X[k] = np.dot(twiddle(n, k, N), x)
    return X
