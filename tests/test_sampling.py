import random

import pytest

from ringlwe.ntt import ModulusParams
from ringlwe.sampling import MAX_VARIANCE, sample_from_error_distribution


class SeededPrng:
    def __init__(self, seed):
        self._rng = random.Random(seed)

    def rand8(self):
        return self._rng.getrandbits(8)

    def rand64(self):
        return self._rng.getrandbits(64)


class AlternatingPrng:
    """Alternates between all-ones and all-zero draws."""

    def __init__(self, full_first):
        self._full = full_first

    def _next(self, bits):
        value = (1 << bits) - 1 if self._full else 0
        self._full = not self._full
        return value

    def rand8(self):
        return self._next(8)

    def rand64(self):
        return self._next(64)


PARAMS = [ModulusParams(12289, 16), ModulusParams(998244353, 32)]


@pytest.mark.parametrize("params", PARAMS)
@pytest.mark.parametrize("variance", [8, 15, 29, 50])
def test_upper_bound_on_noise(params, variance):
    prng = SeededPrng(0)
    q = params.modulus
    for _ in range(3):
        error = sample_from_error_distribution(1024, variance, prng, params)
        assert len(error) == 1024
        for reduced in error:
            assert 0 <= reduced < q
            if reduced > (q >> 1):
                assert q - reduced < 2 * variance + 1
            else:
                assert reduced < 2 * variance + 1


@pytest.mark.parametrize("params", PARAMS)
def test_fail_on_too_large_variance(params):
    variance = MAX_VARIANCE + 1
    with pytest.raises(ValueError) as info:
        sample_from_error_distribution(16, variance, SeededPrng(0), params)
    assert f"The variance, {variance}, must be at most {MAX_VARIANCE}" in str(info.value)


@pytest.mark.parametrize("variance", [1, 3, 4, 40, 50])
def test_positive_extreme_samples(variance):
    params = ModulusParams(12289, 16)
    samples = sample_from_error_distribution(4, variance, AlternatingPrng(True), params)
    assert samples == [2 * variance] * 4


@pytest.mark.parametrize("variance", [1, 3, 4, 40, 50])
def test_negative_extreme_samples(variance):
    params = ModulusParams(12289, 16)
    samples = sample_from_error_distribution(4, variance, AlternatingPrng(False), params)
    assert samples == [12289 - 2 * variance] * 4


def test_zero_variance_gives_zeros():
    params = ModulusParams(12289, 16)
    assert sample_from_error_distribution(8, 0, SeededPrng(1), params) == [0] * 8


def test_same_seed_same_samples():
    params = ModulusParams(12289, 16)
    first = sample_from_error_distribution(64, 8, SeededPrng(5), params)
    second = sample_from_error_distribution(64, 8, SeededPrng(5), params)
    assert first == second