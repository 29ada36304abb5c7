"""Sampling of small error polynomials from a centered binomial distribution."""

from __future__ import annotations

from typing import Protocol

from ringlwe.ntt import ModulusParams

MAX_VARIANCE = 256


class _RandomSource(Protocol):
    def rand8(self) -> int: ...

    def rand64(self) -> int: ...


def sample_from_error_distribution(
    num_coeffs: int, variance: int, prng: _RandomSource, params: ModulusParams
) -> list[int]:
    """Sample ``num_coeffs`` residues from the centered binomial distribution.

    Each sample is the sum of ``2 * variance`` differences of random bit pairs,
    reduced into ``[0, modulus)``.
    """
    if variance < 0:
        raise ValueError(f"The variance, {variance}, must be non-negative.")
    if variance > MAX_VARIANCE:
        raise ValueError(
            f"The variance, {variance}, must be at most {MAX_VARIANCE}."
        )
    q = params.modulus
    coeffs = []
    for _ in range(num_coeffs):
        coefficient = q
        k = variance << 1
        while k > 0:
            if k >= 64:
                coefficient += prng.rand64().bit_count()
                coefficient -= prng.rand64().bit_count()
                k -= 64
            elif k >= 8:
                coefficient += prng.rand8().bit_count()
                coefficient -= prng.rand8().bit_count()
                k -= 8
            else:
                mask = (1 << k) - 1
                coefficient += (prng.rand8() & mask).bit_count()
                coefficient -= (prng.rand8() & mask).bit_count()
                break
        if coefficient >= q:
            coefficient -= q
        coeffs.append(coefficient)
    return coeffs