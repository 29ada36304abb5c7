import random

import pytest

from ringlwe.lazy import LazyPolynomial
from ringlwe.ntt import ModulusParams, initialize_ntt_parameters
from ringlwe.polynomial import Polynomial

LOG_N = 5
N = 1 << LOG_N
MODULUS = 12289


@pytest.fixture(params=[16, 64], ids=["narrow", "wide"])
def params(request):
    return ModulusParams(MODULUS, int_bits=request.param)


@pytest.fixture
def ntt_params(params):
    return initialize_ntt_parameters(LOG_N, params)


@pytest.fixture
def rng():
    return random.Random(1234)


def _sample(rng, params, ntt_params):
    coeffs = [rng.randrange(params.modulus) for _ in range(N)]
    return Polynomial.convert_to_ntt(coeffs, ntt_params, params)


def test_create_export_empty(params):
    empty = LazyPolynomial.create_empty(N, params)
    assert empty.export(params) == Polynomial.zeros(N)


def test_create_export(params, ntt_params, rng):
    poly1 = _sample(rng, params, ntt_params)
    poly2 = _sample(rng, params, ntt_params)
    lazy = LazyPolynomial.create(poly1.coeffs, poly2.coeffs, params)
    assert lazy.export(params) == poly1.mul(poly2, params)


@pytest.mark.parametrize("number_products", [1, 10, 40])
def test_compute_inner_product(params, ntt_params, rng, number_products):
    poly1s = [_sample(rng, params, ntt_params) for _ in range(number_products)]
    poly2s = [_sample(rng, params, ntt_params) for _ in range(number_products)]

    inner_product = Polynomial.zeros(N)
    lazy = LazyPolynomial.create_empty(N, params)
    for p1, p2 in zip(poly1s, poly2s):
        inner_product.fused_mul_add_in_place(p1, p2, params)
        lazy.fused_mul_add_in_place(p1.coeffs, p2.coeffs, params)

    exported = lazy.export(params)
    assert exported == inner_product
    assert all(0 <= c < params.modulus for c in exported.coeffs)


def test_create_then_accumulate_matches_fused(params, ntt_params, rng):
    polys = [_sample(rng, params, ntt_params) for _ in range(24)]
    lazy = LazyPolynomial.create(polys[0].coeffs, polys[1].coeffs, params)
    expected = polys[0].mul(polys[1], params)
    for a, b in zip(polys[2::2], polys[3::2]):
        lazy.fused_mul_add_in_place(a.coeffs, b.coeffs, params)
        expected.fused_mul_add_in_place(a, b, params)
    assert lazy.export(params) == expected


def test_small_known_values():
    params = ModulusParams(17, int_bits=8)
    lazy = LazyPolynomial.create([3, 4], [5, 6], params)
    lazy.fused_mul_add_in_place([16, 2], [16, 8], params)
    assert lazy.export(params).coeffs == [(15 + 256) % 17, (24 + 16) % 17]
    assert len(lazy) == 2


def test_same_size_check_creation(params, ntt_params, rng):
    poly1 = _sample(rng, params, ntt_params)
    poly2 = Polynomial.zeros(N + 1)
    with pytest.raises(ValueError, match="not all of the same size"):
        LazyPolynomial.create(poly1.coeffs, poly2.coeffs, params)


def test_same_size_check_fused_operation(params, ntt_params, rng):
    poly1 = _sample(rng, params, ntt_params)
    poly2 = Polynomial.zeros(N + 1)
    empty = LazyPolynomial.create_empty(N, params)
    with pytest.raises(ValueError, match="not all of the same size"):
        empty.fused_mul_add_in_place(poly1.coeffs, poly2.coeffs, params)


def test_fused_operation_rejects_length_different_from_accumulator(params):
    empty = LazyPolynomial.create_empty(N, params)
    other = [1] * (N // 2)
    with pytest.raises(ValueError, match="not all of the same size"):
        empty.fused_mul_add_in_place(other, other, params)
    assert empty.export(params) == Polynomial.zeros(N)