import pytest

from ecfield import (InvalidModulusError, NonInvertibleError, canonical, check_modulus,
                     extended_gcd, mod_inv)


@pytest.mark.parametrize("a, b", [(240, 46), (17, 5), (0, 9), (12, 12), (2**89 - 1, 2**61 - 1)])
def test_extended_gcd_bezout(a, b):
    g, x, y = extended_gcd(a, b)
    assert a * x + b * y == g
    assert a % g == 0 and b % g == 0


@pytest.mark.parametrize("p", [3, 5, 7, 11, 101])
def test_mod_inv_all_units(p):
    for a in range(1, p):
        inv = mod_inv(a, p)
        assert 0 <= inv < p
        assert a * inv % p == 1


def test_mod_inv_reduces_negative_and_large_inputs():
    assert mod_inv(-2, 7) == 3
    assert mod_inv(9, 7) == mod_inv(2, 7) == 4


@pytest.mark.parametrize("a, p", [(0, 7), (14, 7), (4, 8), (6, 9)])
def test_mod_inv_non_invertible(a, p):
    with pytest.raises(NonInvertibleError) as excinfo:
        mod_inv(a, p)
    assert excinfo.value.modulus == p
    assert excinfo.value.value == a % p


def test_non_invertible_is_arithmetic_and_value_error():
    with pytest.raises(ArithmeticError):
        mod_inv(2, 4)
    with pytest.raises(ValueError):
        mod_inv(2, 4)


def test_canonical():
    assert canonical(-1, 7) == 6
    assert canonical(15, 7) == 1
    assert canonical(0, 7) == 0


@pytest.mark.parametrize("p", [1, 0, -7])
def test_check_modulus_rejects_small(p):
    with pytest.raises(InvalidModulusError):
        check_modulus(p)


def test_check_modulus_does_not_test_primality():
    assert check_modulus(9) == 9
