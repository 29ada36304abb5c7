# ringlwe

Building blocks for Ring-LWE cryptography over the ring Z_q[x]/(x^n + 1),
where n is a power of two and q is a prime with q ≡ 1 (mod 2n). All
arithmetic uses plain Python integers and has no dependencies outside the
standard library.

## What is inside

- `ringlwe.ntt`
  - `ModulusParams(modulus, int_bits=64)`: an odd modulus that must fit into
    `int_bits - 2` bits. It offers `reduce`, `inverse`, `get_constant`
    (a value paired with its Barrett quotient) and `mul_constant`, plus the
    `log_modulus` and `bigint_bits` properties.
  - `bitrev(value, log_n)` and `bitrev_array(log_n)`: bit reversal of the
    lowest `log_n` bits.
  - `primitive_nth_root_of_unity(log_n, params)`, `ntt_psis`,
    `ntt_psis_bitrev` and `ntt_psis_inv_bitrev`: the roots and tables used by
    the forward and inverse transforms.
  - `initialize_ntt_parameters(log_n, params)`: checks that
    `0 < log_n <= 15` and that the modulus is 1 mod 2n, then returns an
    `NttParameters` bundle (`number_coeffs`, `n_inv`, the psi tables with
    their constants, and `bitrevs`).
- `ringlwe.polynomial`
  - `Polynomial`: a polynomial held in NTT form. `Polynomial.convert_to_ntt`
    and `inverse_ntt` move between coefficient and NTT form. A length that is
    not a power of two gives an invalid, empty polynomial (`is_valid()` is
    false). It also offers `zeros`, `add`, `sub`, `mul`, `mul_scalar`,
    `negate`, the in-place forms `add_in_place`, `sub_in_place` and
    `mul_in_place`, `fused_mul_add_in_place`, `substitute` (p(x) -> p(x^k) for
    odd k < 2n), `compute_constant_representation`, `mul_constant`,
    `mul_constant_in_place` and `fused_mul_constant_add_in_place`.
  - `serialize` writes a 4-byte big-endian coefficient count followed by the
    coefficients packed at `log_modulus` bits each; `Polynomial.deserialize`
    reads it back and checks the count and the coefficient range.
  - `sample_polynomial_from_prng(num_coeffs, prng, params)`: a uniformly
    random polynomial drawn from any object with a `rand64()` method.
- `ringlwe.constant`: `ConstantPolynomial`, coefficients paired with their
  Barrett quotients; `ConstantPolynomial.create` requires both sequences to
  have the same length.
- `ringlwe.lazy`: `LazyPolynomial`, an accumulator for sums of
  coordinate-wise products (`create`, `create_empty`,
  `fused_mul_add_in_place`, `export`) that reduces its coefficients only once
  the number of accumulated products reaches the limit the modulus allows.
- `ringlwe.sampling`: `sample_from_error_distribution(num_coeffs, variance,
  prng, params)`, which draws residues from a centered binomial distribution
  using an object with `rand8()` and `rand64()` methods; the variance may be
  at most 256.
- `ringlwe.expand`: `compute_normalizer(k, log_t)`, which returns 2^(-k)
  modulo 2^log_t + 1, and `make_compressed_vector`, which packs a 0/1
  selection vector into NTT polynomials, one monomial per selected index.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from ringlwe.ntt import ModulusParams, initialize_ntt_parameters
from ringlwe.polynomial import Polynomial

params = ModulusParams(12289)               # 12289 = 1 mod 2048
ntt = initialize_ntt_parameters(4, params)  # polynomials with 16 coefficients

p = Polynomial.convert_to_ntt([1] + [0] * 15, ntt, params)
q = Polynomial.convert_to_ntt([0, 1] + [0] * 14, ntt, params)

product = p.mul(q, params)
print(product.inverse_ntt(ntt, params))     # coefficients of 1 * x
```

Operations on polynomials of different lengths, invalid substitution powers
and out-of-range parameters raise `ValueError`.

## What this package does not do

It provides the arithmetic layer only. There are no secret keys, no
encryption or decryption, no ciphertexts, no Galois keys and no routine that
performs the oblivious expansion itself; `ringlwe.expand` only builds and
normalises the compressed selection vectors that such an expansion starts
from. Random sources are supplied by the caller; the package ships no
cryptographically secure generator of its own.