"""Polynomials held as precomputed constants for fast multiplication."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class ConstantPolynomial:
    """Coefficients paired with their precomputed Barrett quotients."""

    coeffs_constant: tuple[int, ...]
    coeffs_constant_barrett: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.coeffs_constant) != len(self.coeffs_constant_barrett):
            raise ValueError("The vectors of Int do not have the same size.")

    @classmethod
    def create(
        cls, constant: Iterable[int], constant_barrett: Iterable[int]
    ) -> ConstantPolynomial:
        """Build a constant polynomial; both sequences must have equal length."""
        return cls(tuple(constant), tuple(constant_barrett))

    def __len__(self) -> int:
        return len(self.coeffs_constant)