"""Accumulators that defer modular reduction across many fused products."""

from __future__ import annotations

from collections.abc import Sequence

from ringlwe.ntt import ModulusParams
from ringlwe.polynomial import Polynomial

_SIZE_ERROR = "The polynomials are not all of the same size."


def _log_maximum_level(params: ModulusParams) -> int:
    # A product of two residues is below 2^(2 * log_modulus); summing up to
    # 2^level of them must stay below 2^(bigint_bits - 1).
    log_maximum_level = params.bigint_bits - 1 - 2 * params.log_modulus
    if log_maximum_level < 1:
        raise ValueError(
            "The current parameters do not allow for lazy polynomials, as the "
            f"logarithm of the maximum level, {log_maximum_level} is stricly "
            "smaller than 1."
        )
    return log_maximum_level


class LazyPolynomial:
    """Sum of coordinate-wise products, reduced only when the accumulator fills.

    Coefficients are kept unreduced in a double-width accumulator and reduced
    once the number of accumulated products reaches the maximum level allowed
    by the parameters.
    """

    def __init__(
        self, coeffs: list[int], current_level: int, maximum_level: int
    ) -> None:
        self._coeffs = coeffs
        self._current_level = current_level
        self._maximum_level = maximum_level

    @classmethod
    def create(
        cls, a: Sequence[int], b: Sequence[int], params: ModulusParams
    ) -> LazyPolynomial:
        """Start an accumulator holding the coordinate-wise product of ``a`` and ``b``."""
        if len(a) != len(b):
            raise ValueError(_SIZE_ERROR)
        log_maximum_level = _log_maximum_level(params)
        coeffs = [params.reduce(x) * params.reduce(y) for x, y in zip(a, b)]
        return cls(coeffs, 1, 1 << log_maximum_level)

    @classmethod
    def create_empty(cls, length: int, params: ModulusParams) -> LazyPolynomial:
        """Start an accumulator of ``length`` zero coefficients."""
        log_maximum_level = _log_maximum_level(params)
        return cls([0] * length, 0, 1 << log_maximum_level)

    def __len__(self) -> int:
        return len(self._coeffs)

    def fused_mul_add_in_place(
        self, a: Sequence[int], b: Sequence[int], params: ModulusParams
    ) -> None:
        """Add the coordinate-wise product of ``a`` and ``b`` to the accumulator."""
        if len(a) != len(b) or len(a) != len(self._coeffs):
            raise ValueError(_SIZE_ERROR)
        if self._current_level == self._maximum_level:
            self._refresh(params)
        self._coeffs[:] = [
            c + params.reduce(x) * params.reduce(y)
            for c, x, y in zip(self._coeffs, a, b)
        ]
        self._current_level += 1

    def export(self, params: ModulusParams) -> Polynomial:
        """Return the accumulated sum as a reduced polynomial."""
        return Polynomial([params.reduce(c) for c in self._coeffs])

    def _refresh(self, params: ModulusParams) -> None:
        self._coeffs[:] = [params.reduce(c) for c in self._coeffs]
        self._current_level = 1