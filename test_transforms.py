import numpy as np
import pytest
from fourier_transforms import PreconditionError, direct_transform, fft, fft_into, inv_fft, inv_fft_into

SIZES = [0, 1, 2, 3, 5, 7, 11, 6, 12, 15, 30, 16, 27, 64]


def random_sequence(n, seed=0):
    rng = np.random.default_rng(seed)
    return rng.standard_normal(n) + 1j * rng.standard_normal(n)


@pytest.mark.parametrize("n", SIZES)
def test_fft_matches_direct(n):
    x = random_sequence(n, seed=n)
    expected = direct_transform(np.empty_like(x), x)
    np.testing.assert_allclose(fft(x), expected, rtol=1e-9, atol=1e-9 * max(n, 1))


@pytest.mark.parametrize("n", SIZES)
def test_inverse_round_trip(n):
    x = random_sequence(n, seed=100 + n)
    np.testing.assert_allclose(inv_fft(fft(x)), x, atol=1e-10)
    np.testing.assert_allclose(fft(inv_fft(x)), x, atol=1e-10)


def test_inv_fft_matches_numpy():
    x = random_sequence(45, seed=9)
    np.testing.assert_allclose(inv_fft(x), np.fft.ifft(x), atol=1e-12)


def test_linearity():
    x = random_sequence(30, seed=1)
    y = random_sequence(30, seed=2)
    a, b = 2 - 1j, 0.5 + 3j
    np.testing.assert_allclose(fft(a * x + b * y), a * fft(x) + b * fft(y), atol=1e-9)


@pytest.mark.parametrize("n", [5, 12, 64, 97])
def test_parseval(n):
    x = random_sequence(n, seed=n)
    X = fft(x)
    np.testing.assert_allclose(np.sum(np.abs(X) ** 2), n * np.sum(np.abs(x) ** 2), rtol=1e-10)


@pytest.mark.parametrize("transform", [fft, inv_fft])
def test_input_is_not_modified(transform):
    x = random_sequence(36, seed=4)
    before = x.copy()
    transform(x)
    np.testing.assert_array_equal(x, before)


@pytest.mark.parametrize("transform", [fft_into, inv_fft_into])
def test_into_variants_write_output_and_keep_input(transform):
    x = random_sequence(20, seed=6)
    before = x.copy()
    X = np.zeros_like(x)

    result = transform(X, x)

    assert result is X
    np.testing.assert_array_equal(x, before)
    assert np.any(X != 0)


def test_concrete_four_point():
    X = fft([1, 2, 3, 4])
    np.testing.assert_allclose(X, [10, -2 + 2j, -2, -2 - 2j], atol=1e-12)
    np.testing.assert_allclose(inv_fft(X), [1, 2, 3, 4], atol=1e-12)


def test_single_element_identity():
    np.testing.assert_array_equal(fft([5 + 3j]), [5 + 3j])
    np.testing.assert_array_equal(inv_fft([5 + 3j]), [5 + 3j])


def test_empty_sequence():
    assert fft([]).shape == (0,)
    assert inv_fft([]).shape == (0,)


def test_complex64_is_kept():
    x = random_sequence(12, seed=8).astype(np.complex64)
    X = fft(x)
    assert X.dtype == np.complex64
    np.testing.assert_allclose(X, np.fft.fft(x), rtol=1e-4, atol=1e-4)


def test_custom_radix_selector_is_used():
    seen = []

    def select(n):
        seen.append(n)
        return n  # always the direct transform

    x = random_sequence(10)
    np.testing.assert_allclose(fft(x, choose_radix=select), np.fft.fft(x), atol=1e-10)
    assert 10 in seen


@pytest.mark.parametrize(
    "output, x, description",
    [
        (np.zeros(3, complex), np.zeros(4), "length mismatch"),
        (np.zeros(4), np.zeros(4), "real output buffer"),
        ([0j] * 4, np.zeros(4), "output is not an array"),
        (np.zeros(4, complex), np.zeros((2, 2)), "two-dimensional input"),
    ],
)
def test_into_rejects_bad_buffers(output, x, description):
    with pytest.raises(PreconditionError):
        fft_into(output, x)
    with pytest.raises(PreconditionError):
        inv_fft_into(output, x)
