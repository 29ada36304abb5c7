import pytest

from ringlwe.constant import ConstantPolynomial


@pytest.mark.parametrize("length_constant", [1, 10, 1024])
@pytest.mark.parametrize("length_barrett", [1, 10, 1024])
def test_create_checks_lengths(length_constant, length_barrett):
    constant = [0] * length_constant
    barrett = [0] * length_barrett
    if length_constant == length_barrett:
        poly = ConstantPolynomial.create(constant, barrett)
        assert len(poly) == length_constant
    else:
        with pytest.raises(ValueError, match="The vectors of Int do not have the same size."):
            ConstantPolynomial.create(constant, barrett)


def test_create_keeps_values():
    poly = ConstantPolynomial.create([1, 2, 3], [4, 5, 6])
    assert poly.coeffs_constant == (1, 2, 3)
    assert poly.coeffs_constant_barrett == (4, 5, 6)


def test_direct_construction_validates():
    with pytest.raises(ValueError):
        ConstantPolynomial((1, 2), (3,))