import random

import pytest

from ecfield import InvalidBitLengthError, check_bits, generate_prime, is_prime_miller_rabin


def _is_prime_trial(n):
    return n >= 2 and all(n % d for d in range(2, int(n ** 0.5) + 1))


def test_miller_rabin_small_numbers():
    for n in range(-5, 2000):
        assert is_prime_miller_rabin(n) == _is_prime_trial(n), n


@pytest.mark.parametrize("n", [561, 1105, 1729, 2465, 2821, 6601, 8911])
def test_miller_rabin_carmichael(n):
    assert not is_prime_miller_rabin(n)


def test_miller_rabin_large():
    assert is_prime_miller_rabin(2 ** 61 - 1)
    assert is_prime_miller_rabin(2 ** 127 - 1)
    assert not is_prime_miller_rabin(2 ** 61 + 1)
    assert not is_prime_miller_rabin((2 ** 61 - 1) * (2 ** 31 - 1))


@pytest.mark.parametrize("bits", range(2, 33))
def test_generate_prime_exact_bits(bits):
    rng = random.Random(bits)
    p = generate_prime(bits, rng=rng)
    assert p.bit_length() == bits
    assert is_prime_miller_rabin(p)


def test_generate_prime_two_bits():
    assert {generate_prime(2, rng=random.Random(seed)) for seed in range(30)} == {2, 3}


@pytest.mark.parametrize("bits", [-1, 0, 1])
def test_bits_too_small(bits):
    with pytest.raises(InvalidBitLengthError):
        generate_prime(bits)


def test_bits_range_is_configurable():
    with pytest.raises(InvalidBitLengthError):
        check_bits(4, min_bits=8)
    with pytest.raises(InvalidBitLengthError):
        generate_prime(65, max_bits=64)
    assert check_bits(8, min_bits=8) == 8
