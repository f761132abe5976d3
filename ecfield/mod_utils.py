"""
Modular arithmetic helpers.

Python integers are arbitrary precision, so these wrap them with the
operations the curve code needs: canonical reduction, inverses and
modulus sanity checks.
"""

from typing import Tuple

from .errors import InvalidModulusError, NonInvertibleError


def check_modulus(p: int) -> int:
    """
    Reject moduli that cannot describe a field.

    Primality is NOT checked; only p >= 2 is enforced.

    Returns:
        p unchanged
    """
    if p < 2:
        raise InvalidModulusError(f"Modulus must be at least 2, got {p}")
    return p


def canonical(value: int, p: int) -> int:
    """Reduce value into [0, p)."""
    return value % p


def extended_gcd(a: int, b: int) -> Tuple[int, int, int]:
    """
    Extended Euclidean algorithm.

    Args:
        a: First integer
        b: Second integer

    Returns:
        (g, x, y) such that a*x + b*y = g = gcd(a, b)
    """
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1

    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t

    return old_r, old_s, old_t


def mod_inv(a: int, p: int) -> int:
    """
    Compute the modular inverse of a mod p.

    Args:
        a: Value to invert
        p: Modulus

    Returns:
        x in [0, p) with a*x = 1 (mod p)

    Raises:
        NonInvertibleError: If gcd(a, p) != 1
    """
    a = a % p
    g, x, _ = extended_gcd(a, p)
    if g != 1:
        raise NonInvertibleError(a, p)
    return x % p
