"""Helpers for compressing and normalising selection vectors before oblivious expansion."""

from __future__ import annotations

from collections.abc import Iterable

from ringlwe.ntt import ModulusParams, NttParameters
from ringlwe.polynomial import Polynomial


def compute_normalizer(k: int, log_t: int) -> int:
    """Return ``2^(-k)`` modulo ``2^log_t + 1``.

    Expanding a ciphertext over ``k`` levels multiplies its plaintext by
    ``2^k``; pre-multiplying by this value cancels that factor.
    """
    if log_t <= 0:
        raise ValueError(f"log_t, {log_t}, must be positive.")
    if k < 0:
        raise ValueError(f"k, {k}, must be non-negative.")
    # With k = p * log_t + r, 2^(-k) = 2^(log_t - r) * 2^((-p - 1) * log_t),
    # and 2^log_t = -1 modulo 2^log_t + 1.
    p, r = divmod(k, log_t)
    power = 1 << (log_t - r)
    if p % 2 == 0:
        return (1 << log_t) + 1 - power
    return power


def make_compressed_vector(
    total_size: int,
    indices: Iterable[int],
    log_compression_factor: int,
    params: ModulusParams,
    ntt_params: NttParameters,
) -> list[Polynomial]:
    """Compress a 0/1 vector of length ``total_size`` into NTT polynomials.

    For every index, polynomial ``index // 2^log_compression_factor`` holds the
    monomial ``x^(index % 2^log_compression_factor)``. The result has
    ``ceil(total_size / 2^log_compression_factor)`` polynomials.
    """
    compression_factor = 1 << log_compression_factor
    num_coeffs = ntt_params.number_coeffs
    if compression_factor > num_coeffs:
        raise ValueError(f"Compression factor must be less than {num_coeffs}")

    size_compression = -(-total_size // compression_factor)
    vectors = [[0] * num_coeffs for _ in range(size_compression)]
    for index in indices:
        if index < 0 or index >= total_size:
            raise ValueError("Index out of range for total size.")
        polynomial_index, position = divmod(index, compression_factor)
        vectors[polynomial_index][position] = 1

    return [Polynomial.convert_to_ntt(v, ntt_params, params) for v in vectors]