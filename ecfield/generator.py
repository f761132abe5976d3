"""
Random prime source for the "curves for a random prime" path.

The curve core never calls this; it only consumes the resulting prime.
"""

import random
from typing import Optional

from .errors import InvalidBitLengthError

SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def is_prime_miller_rabin(n: int, k: int = 12,
                          rng: Optional[random.Random] = None) -> bool:
    """
    Miller-Rabin primality test.

    Args:
        n: Number to test for primality
        k: Number of rounds (higher = more accurate)
        rng: Random source for witnesses (defaults to the random module)

    Returns:
        True if n is probably prime, False if composite
    """
    if n < 2:
        return False
    for q in SMALL_PRIMES:
        if n % q == 0:
            return n == q

    rng = rng or random

    # Write n-1 as 2^r * d
    d = n - 1
    r = 0
    while d % 2 == 0:
        d >>= 1
        r += 1

    # Witness loop
    for _ in range(k):
        a = rng.randrange(2, n - 1)
        x = pow(a, d, n)

        if x == 1 or x == n - 1:
            continue

        for _ in range(r - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False

    return True


def check_bits(bits: int, min_bits: int = 2, max_bits: int = 4096) -> int:
    """
    Validate a requested prime size.

    Raises:
        InvalidBitLengthError: If bits is outside [min_bits, max_bits]
    """
    if bits < min_bits:
        raise InvalidBitLengthError(
            f"Number of bits must be at least {min_bits}, got {bits}")
    if bits > max_bits:
        raise InvalidBitLengthError(
            f"Number of bits must be at most {max_bits}, got {bits}")
    return bits


def generate_prime(bits: int, min_bits: int = 2, max_bits: int = 4096,
                   rng: Optional[random.Random] = None) -> int:
    """
    Generate a random prime of exactly `bits` bits.

    Args:
        bits: Bit length of the prime
        min_bits: Smallest accepted bit length
        max_bits: Largest accepted bit length
        rng: Random source (defaults to the random module)

    Returns:
        A prime p with p.bit_length() == bits
    """
    check_bits(bits, min_bits, max_bits)
    rng = rng or random

    if bits == 2:
        return rng.choice((2, 3))

    while True:
        # Force the top bit so the length is exact, and the low bit for oddness
        p = rng.getrandbits(bits) | (1 << (bits - 1)) | 1
        if is_prime_miller_rabin(p, rng=rng):
            return p
