"""
Elliptic curve arithmetic over GF(p) for curves y^2 = x^3 + ax + b.

Points are one of two variants:
    AffinePoint(x, y)  -> external triple (x, y, 1)
    INFINITY           -> external triple (0, 1, 0), the group identity
"""

from dataclasses import dataclass
from typing import Tuple, Union

from .errors import MalformedInputError
from .mod_utils import canonical, check_modulus, mod_inv


@dataclass(frozen=True)
class AffinePoint:
    """A finite point (x, y) on a curve."""
    x: int
    y: int

    @property
    def is_infinity(self) -> bool:
        return False

    def as_triple(self) -> Tuple[int, int, int]:
        return (self.x, self.y, 1)

    def reduced(self, p: int) -> "AffinePoint":
        """Copy with both coordinates reduced into [0, p)."""
        return AffinePoint(canonical(self.x, p), canonical(self.y, p))


@dataclass(frozen=True)
class PointAtInfinity:
    """The point at infinity. All instances compare equal."""

    @property
    def is_infinity(self) -> bool:
        return True

    def as_triple(self) -> Tuple[int, int, int]:
        return (0, 1, 0)

    def reduced(self, p: int) -> "PointAtInfinity":
        return self


INFINITY = PointAtInfinity()

Point = Union[AffinePoint, PointAtInfinity]


def point_from_triple(x: int, y: int, z: int) -> Point:
    """
    Decode the external (x, y, z) encoding.

    Args:
        x, y: Coordinates (ignored when z == 0)
        z: 0 for the point at infinity, 1 for an affine point

    Returns:
        The matching point variant

    Raises:
        MalformedInputError: If z is not 0 or 1
    """
    if z == 0:
        return INFINITY
    if z == 1:
        return AffinePoint(x, y)
    raise MalformedInputError(f"Point flag z must be 0 or 1, got {z}")


def point_key(P: Point) -> Tuple[int, int, int]:
    """Sort key: lexicographic (x, y, z) on the external triple."""
    return P.as_triple()


def is_non_singular(a: int, b: int, p: int) -> bool:
    """
    Check the discriminant condition 4a^3 + 27b^2 != 0 (mod p).

    Args:
        a: Coefficient of x
        b: Constant term
        p: Modulus

    Returns:
        True if the curve is non-singular
    """
    check_modulus(p)
    return (4 * pow(a, 3, p) + 27 * pow(b, 2, p)) % p != 0


def evaluate_curve(a: int, b: int, p: int, x: int) -> int:
    """Right-hand side x^3 + ax + b reduced mod p."""
    return (pow(x, 3, p) + a * x + b) % p


def format_curve(a: int, b: int, p: int) -> str:
    """
    Render the curve equation, e.g. "y^2 = x^3 + 3x + 1 (mod 7)".

    The x term is dropped when a == 0 and written bare when a == 1;
    the constant is dropped when b == 0.
    """
    equation = "y^2 = x^3"

    if a == 1:
        equation += " + x"
    elif a != 0:
        equation += f" + {a}x"
    if b != 0:
        equation += f" + {b}"
    equation += f" (mod {p})"

    return equation


def add_points(P: Point, Q: Point, p: int) -> Point:
    """
    Chord addition of two points.

    Only valid for points with distinct x coordinates. When x_P == x_Q the
    result is INFINITY, whether the points are inverses or equal; use
    double_point() for P + P.

    Args:
        P: First point
        Q: Second point
        p: Modulus

    Returns:
        P + Q

    Raises:
        NonInvertibleError: If x_Q - x_P has no inverse mod p
    """
    check_modulus(p)
    if P.is_infinity:
        return Q
    if Q.is_infinity:
        return P

    P = P.reduced(p)
    Q = Q.reduced(p)

    den = (Q.x - P.x) % p
    if den == 0:
        return INFINITY

    lam = (Q.y - P.y) * mod_inv(den, p) % p
    x3 = (lam * lam - P.x - Q.x) % p
    y3 = (lam * (P.x - x3) - P.y) % p
    return AffinePoint(x3, y3)


def double_point(P: Point, a: int, p: int) -> Point:
    """
    Tangent doubling 2P.

    Args:
        P: Point to double
        a: Curve coefficient of x
        p: Modulus

    Returns:
        2P, or INFINITY when P is INFINITY or has y == 0

    Raises:
        NonInvertibleError: If 2y has no inverse mod p
    """
    check_modulus(p)
    if P.is_infinity:
        return INFINITY

    P = P.reduced(p)
    if P.y == 0:
        return INFINITY

    lam = (3 * P.x * P.x + a) * mod_inv(2 * P.y, p) % p
    x3 = (lam * lam - 2 * P.x) % p
    y3 = (lam * (P.x - x3) - P.y) % p
    return AffinePoint(x3, y3)
