"""Modular arithmetic parameters and precomputed tables for the negacyclic NTT."""

from __future__ import annotations

from dataclasses import dataclass

MAX_LOG_NUM_COEFFS = 15


@dataclass(frozen=True)
class ModulusParams:
    """Arithmetic modulo an odd modulus stored in words of ``int_bits`` bits."""

    modulus: int
    int_bits: int = 64

    def __post_init__(self) -> None:
        if self.int_bits < 8:
            raise ValueError("The word size must be at least 8 bits.")
        if self.modulus < 3 or self.modulus % 2 == 0:
            raise ValueError("The modulus must be an odd integer greater than 2.")
        if self.modulus.bit_length() > self.int_bits - 2:
            raise ValueError(
                f"The modulus, {self.modulus}, does not fit into "
                f"{self.int_bits - 2} bits."
            )

    @property
    def log_modulus(self) -> int:
        """Number of bits of the modulus."""
        return self.modulus.bit_length()

    @property
    def bigint_bits(self) -> int:
        """Size in bits of the double-width accumulator word."""
        return 2 * self.int_bits

    def reduce(self, value: int) -> int:
        """Return ``value`` reduced into ``[0, modulus)``."""
        return value % self.modulus

    def inverse(self, value: int) -> int:
        """Return the multiplicative inverse of ``value`` modulo the modulus."""
        try:
            return pow(value, -1, self.modulus)
        except ValueError:
            raise ValueError(
                f"{value} has no inverse modulo {self.modulus}."
            ) from None

    def get_constant(self, value: int) -> tuple[int, int]:
        """Return ``(value, floor(value * 2^int_bits / modulus))`` for fast products."""
        constant = value % self.modulus
        return constant, (constant << self.int_bits) // self.modulus

    def mul_constant(self, value: int, constant: int, constant_barrett: int) -> int:
        """Multiply ``value`` by a precomputed constant, reducing into ``[0, modulus)``."""
        mask = (1 << self.int_bits) - 1
        quotient = (value * constant_barrett) >> self.int_bits
        result = (value * constant - quotient * self.modulus) & mask
        if result >= self.modulus:
            result -= self.modulus
        return result


@dataclass
class NttParameters:
    """All tables needed to run forward and inverse NTTs of one length."""

    number_coeffs: int
    n_inv: int
    psis_bitrev: list[int]
    psis_bitrev_constant: list[tuple[int, int]]
    psis_inv_bitrev: list[int]
    psis_inv_bitrev_constant: list[tuple[int, int]]
    bitrevs: list[int]


def bitrev(value: int, log_n: int) -> int:
    """Reverse the order of the rightmost ``log_n`` bits of ``value``."""
    output = 0
    for _ in range(log_n):
        output = (output << 1) | (value & 1)
        value >>= 1
    return output


def bitrev_array(log_n: int) -> list[int]:
    """Return the bit reversal of every index in ``[0, 2^log_n)``."""
    return [bitrev(i, log_n) for i in range(1 << log_n)]


def _permute_bitrev(items: list[int], bitrevs: list[int]) -> list[int]:
    # Bit reversal is an involution, so gathering equals the pairwise swaps.
    return [items[r] for r in bitrevs]


def primitive_nth_root_of_unity(log_n: int, params: ModulusParams) -> int:
    """Return a primitive ``2^log_n``-th root of unity modulo a prime modulus."""
    q = params.modulus
    n = 1 << log_n
    half_n = n >> 1
    k = (q - 1) // n
    for t in range(2, q):
        candidate = pow(t, k, q)
        if pow(candidate, half_n, q) != 1:
            return candidate
    raise RuntimeError("Loop in PrimitiveNthRootOfUnity terminated.")


def ntt_psis(log_n: int, params: ModulusParams) -> list[int]:
    """Return ``psi^0 .. psi^(n-1)`` for a primitive ``2n``-th root of unity psi."""
    psi = primitive_nth_root_of_unity(log_n + 1, params)
    q = params.modulus
    return [pow(psi, i, q) for i in range(1 << log_n)]


def ntt_psis_bitrev(log_n: int, params: ModulusParams) -> list[int]:
    """Return the powers of psi in bit-reversed order."""
    return _permute_bitrev(ntt_psis(log_n, params), bitrev_array(log_n))


def ntt_psis_inv_bitrev(log_n: int, params: ModulusParams) -> list[int]:
    """Return the inverse powers of psi, bit-reversed, each times psi^-1."""
    q = params.modulus
    psis = ntt_psis(log_n, params)
    # Entry i of the reversed tail times entry i of the original is psi^n = -1.
    row = [psis[0], *reversed(psis[1:])]
    negative_psi_inv = row[1]
    psi_inv = (-negative_psi_inv) % q
    row = _permute_bitrev(row, bitrev_array(log_n))
    return [row[0] * psi_inv % q] + [value * negative_psi_inv % q for value in row[1:]]


def _log_n_fits(log_n: int, params: ModulusParams) -> bool:
    return log_n < params.int_bits - 1


def initialize_ntt_parameters(log_n: int, params: ModulusParams) -> NttParameters:
    """Validate ``log_n`` against the modulus and build every NTT table."""
    if log_n <= 0:
        raise ValueError("log_n must be positive")
    if log_n > MAX_LOG_NUM_COEFFS:
        raise ValueError(
            f"log_n, {log_n}, must be less than {MAX_LOG_NUM_COEFFS}."
        )
    if not _log_n_fits(log_n, params):
        raise ValueError(
            f"log_n, {log_n}, does not fit into underlying ModularInt::Int type."
        )
    n = 1 << log_n
    if params.modulus % (2 * n) != 1:
        raise ValueError(f"modulus is not 1 mod 2n for logn, {log_n}")

    psis_bitrev = ntt_psis_bitrev(log_n, params)
    psis_inv_bitrev = ntt_psis_inv_bitrev(log_n, params)
    return NttParameters(
        number_coeffs=n,
        n_inv=params.inverse(n),
        psis_bitrev=psis_bitrev,
        psis_bitrev_constant=[params.get_constant(p) for p in psis_bitrev],
        psis_inv_bitrev=psis_inv_bitrev,
        psis_inv_bitrev_constant=[params.get_constant(p) for p in psis_inv_bitrev],
        bitrevs=bitrev_array(log_n),
    )