"""Polynomials modulo ``x^n + 1`` held in NTT (evaluation) form."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Protocol

from ringlwe.constant import ConstantPolynomial
from ringlwe.ntt import MAX_LOG_NUM_COEFFS, ModulusParams, NttParameters

_MAX_NUM_COEFFS = 1 << MAX_LOG_NUM_COEFFS
_HEADER_BYTES = 4
_SIZE_ERROR = "Input vectors are not of same size"


class _RandomSource(Protocol):
    def rand64(self) -> int: ...


def _check_same_length(*lengths: int) -> None:
    if len(set(lengths)) != 1:
        raise ValueError(_SIZE_ERROR)


@dataclass
class Polynomial:
    """A polynomial in NTT form; its length must be a power of two to be valid."""

    coeffs: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.coeffs = list(self.coeffs)

    def __len__(self) -> int:
        return len(self.coeffs)

    @classmethod
    def zeros(cls, length: int) -> Polynomial:
        """Return the all-zero polynomial with ``length`` coefficients."""
        return cls([0] * length)

    @classmethod
    def convert_to_ntt(
        cls, coeffs: Iterable[int], ntt_params: NttParameters, params: ModulusParams
    ) -> Polynomial:
        """Transform coefficients into NTT form.

        A length that is not a positive power of two yields an invalid
        (empty) polynomial.
        """
        values = [params.reduce(c) for c in coeffs]
        n = len(values)
        if n <= 0 or n & (n - 1):
            return cls()
        output = cls(values)
        output._cooley_tukey(ntt_params.psis_bitrev_constant, params)
        return output

    def inverse_ntt(self, ntt_params: NttParameters, params: ModulusParams) -> list[int]:
        """Return the coefficient representation of this polynomial."""
        copy = Polynomial(self.coeffs)
        copy._gentleman_sande(ntt_params.psis_inv_bitrev_constant, params)
        q = params.modulus
        return [c * ntt_params.n_inv % q for c in copy.coeffs]

    def is_valid(self) -> bool:
        """Whether the polynomial holds any coefficients."""
        return bool(self.coeffs)

    def mul_scalar(self, scalar: int, params: ModulusParams) -> Polynomial:
        """Return this polynomial multiplied by ``scalar``."""
        q = params.modulus
        return Polynomial([c * scalar % q for c in self.coeffs])

    def mul(self, other: Polynomial, params: ModulusParams) -> Polynomial:
        """Coordinate-wise product."""
        output = Polynomial(self.coeffs)
        output.mul_in_place(other, params)
        return output

    def mul_in_place(self, other: Polynomial, params: ModulusParams) -> None:
        """Coordinate-wise product in place."""
        _check_same_length(len(self), len(other))
        q = params.modulus
        self.coeffs[:] = [a * b % q for a, b in zip(self.coeffs, other.coeffs)]

    def fused_mul_add_in_place(
        self, a: Polynomial, b: Polynomial, params: ModulusParams
    ) -> None:
        """Compute ``self += a * b`` coordinate-wise."""
        _check_same_length(len(self), len(a), len(b))
        q = params.modulus
        self.coeffs[:] = [
            (c + x * y) % q for c, x, y in zip(self.coeffs, a.coeffs, b.coeffs)
        ]

    def fused_mul_constant_add_in_place(
        self, a: Polynomial, b: ConstantPolynomial, params: ModulusParams
    ) -> None:
        """Compute ``self += a * b`` where ``b`` is a constant polynomial."""
        _check_same_length(len(self), len(a), len(b))
        q = params.modulus
        self.coeffs[:] = [
            (c + params.mul_constant(x, constant, barrett)) % q
            for c, x, constant, barrett in zip(
                self.coeffs, a.coeffs, b.coeffs_constant, b.coeffs_constant_barrett
            )
        ]

    def negate(self, params: ModulusParams) -> Polynomial:
        """Return the additive inverse."""
        q = params.modulus
        return Polynomial([-c % q for c in self.coeffs])

    def add(self, other: Polynomial, params: ModulusParams) -> Polynomial:
        """Coordinate-wise sum."""
        output = Polynomial(self.coeffs)
        output.add_in_place(other, params)
        return output

    def sub(self, other: Polynomial, params: ModulusParams) -> Polynomial:
        """Coordinate-wise difference."""
        output = Polynomial(self.coeffs)
        output.sub_in_place(other, params)
        return output

    def add_in_place(self, other: Polynomial, params: ModulusParams) -> None:
        """Coordinate-wise sum in place."""
        _check_same_length(len(self), len(other))
        q = params.modulus
        self.coeffs[:] = [(a + b) % q for a, b in zip(self.coeffs, other.coeffs)]

    def sub_in_place(self, other: Polynomial, params: ModulusParams) -> None:
        """Coordinate-wise difference in place."""
        _check_same_length(len(self), len(other))
        q = params.modulus
        self.coeffs[:] = [(a - b) % q for a, b in zip(self.coeffs, other.coeffs)]

    def substitute(
        self, power: int, ntt_params: NttParameters, params: ModulusParams
    ) -> Polynomial:
        """Return the NTT form of ``p(x^power)`` for odd ``0 <= power < 2n``."""
        n = len(self)
        if power < 0 or power % 2 == 0 or power >= 2 * n:
            raise ValueError(
                "Substitution power must be a non-negative odd integer less than 2*n."
            )
        bitrevs = ntt_params.bitrevs
        out = list(self.coeffs)
        # Evaluations are stored in bit-reversed order of the powers of psi.
        psi_power_index = (power - 1) // 2
        for target in bitrevs[:n]:
            out[target] = self.coeffs[bitrevs[psi_power_index]]
            psi_power_index = (psi_power_index + power) % n
        return Polynomial(out)

    def serialize(self, params: ModulusParams) -> bytes:
        """Pack the coefficient count and ``log_modulus``-bit coefficients."""
        bits = params.log_modulus
        count = len(self)
        body_len = (count * bits + 7) // 8
        packed = 0
        for c in self.coeffs:
            packed = (packed << bits) | params.reduce(c)
        packed <<= body_len * 8 - count * bits
        header = count.to_bytes(_HEADER_BYTES, "big", signed=True)
        return header + packed.to_bytes(body_len, "big")

    @classmethod
    def deserialize(cls, data: bytes, params: ModulusParams) -> Polynomial:
        """Rebuild a polynomial from the output of :meth:`serialize`."""
        if len(data) < _HEADER_BYTES:
            raise ValueError("Serialized polynomial is too short.")
        count = int.from_bytes(data[:_HEADER_BYTES], "big", signed=True)
        if count <= 0:
            raise ValueError("Number of serialized coefficients must be positive.")
        if count > _MAX_NUM_COEFFS:
            raise ValueError(
                f"Number of serialized coefficients, {count}, must be less than "
                f"{_MAX_NUM_COEFFS}."
            )
        bits = params.log_modulus
        body = data[_HEADER_BYTES:]
        body_len = (count * bits + 7) // 8
        if len(body) != body_len:
            raise ValueError(
                f"Serialized coefficients must take {body_len} bytes, "
                f"got {len(body)}."
            )
        packed = int.from_bytes(body, "big") >> (body_len * 8 - count * bits)
        mask = (1 << bits) - 1
        coeffs = [(packed >> (bits * (count - 1 - i))) & mask for i in range(count)]
        if any(c >= params.modulus for c in coeffs):
            raise ValueError("Serialized coefficient is not reduced modulo the modulus.")
        return cls(coeffs)

    def compute_constant_representation(
        self, params: ModulusParams
    ) -> ConstantPolynomial:
        """Return the precomputed-constant form of the coefficients."""
        pairs = [params.get_constant(c) for c in self.coeffs]
        return ConstantPolynomial.create(
            [constant for constant, _ in pairs], [barrett for _, barrett in pairs]
        )

    def mul_constant(
        self, other: ConstantPolynomial, params: ModulusParams
    ) -> Polynomial:
        """Coordinate-wise product with a constant polynomial."""
        output = Polynomial(self.coeffs)
        output.mul_constant_in_place(other, params)
        return output

    def mul_constant_in_place(
        self, other: ConstantPolynomial, params: ModulusParams
    ) -> None:
        """Coordinate-wise product with a constant polynomial, in place."""
        _check_same_length(len(self), len(other))
        self.coeffs[:] = [
            params.mul_constant(c, constant, barrett)
            for c, constant, barrett in zip(
                self.coeffs, other.coeffs_constant, other.coeffs_constant_barrett
            )
        ]

    def _cooley_tukey(
        self, psis_bitrev_constant: Sequence[tuple[int, int]], params: ModulusParams
    ) -> None:
        q = params.modulus
        c = self.coeffs
        n = len(c)
        constants = iter(psis_bitrev_constant[1:])
        half = n >> 1
        while half:
            m = half << 1
            for k in range(0, n, m):
                psi_constant, psi_barrett = next(constants)
                lows = c[k : k + half]
                ts = [
                    params.mul_constant(v, psi_constant, psi_barrett)
                    for v in c[k + half : k + m]
                ]
                c[k : k + half] = [(u + t) % q for u, t in zip(lows, ts)]
                c[k + half : k + m] = [(u - t) % q for u, t in zip(lows, ts)]
            half >>= 1

    def _gentleman_sande(
        self, psis_inv_bitrev_constant: Sequence[tuple[int, int]], params: ModulusParams
    ) -> None:
        q = params.modulus
        c = self.coeffs
        n = len(c)
        constants = iter(psis_inv_bitrev_constant)
        half = 1
        while half < n:
            m = half << 1
            for k in range(0, n, m):
                psi_constant, psi_barrett = next(constants)
                lows = c[k : k + half]
                highs = c[k + half : k + m]
                c[k : k + half] = [(u + t) % q for u, t in zip(lows, highs)]
                c[k + half : k + m] = [
                    params.mul_constant((u - t) % q, psi_constant, psi_barrett)
                    for u, t in zip(lows, highs)
                ]
            half = m


def _import_random(prng: _RandomSource, params: ModulusParams) -> int:
    bits = params.log_modulus
    words = (bits + 63) // 64
    mask = (1 << bits) - 1
    while True:
        value = 0
        for _ in range(words):
            value = (value << 64) | prng.rand64()
        value &= mask
        if value < params.modulus:
            return value


def sample_polynomial_from_prng(
    num_coeffs: int, prng: _RandomSource, params: ModulusParams
) -> Polynomial:
    """Sample a uniformly random polynomial directly in NTT form."""
    if num_coeffs < 1:
        raise ValueError(
            "SamplePolynomialFromPrng: number of coefficients must be a "
            "non-negative integer."
        )
    return Polynomial([_import_random(prng, params) for _ in range(num_coeffs)])