"""
Rational point enumeration.

For each x in GF(p) the right-hand side x^3 + ax + b is looked up in the
quadratic residue table; a hit with root y1 gives the points (x, y1) and
(x, p - y1).

Time Complexity: O(p)
Space Complexity: O(p)
"""

from typing import List

from .ecc_utils import INFINITY, AffinePoint, Point, evaluate_curve, point_key
from .mod_utils import check_modulus
from .residues import build_residue_table


def find_rational_points(a: int, b: int, p: int) -> List[Point]:
    """
    List every point of y^2 = x^3 + ax + b over GF(p).

    The curve is not required to be non-singular.

    Args:
        a: Coefficient of x
        b: Constant term
        p: Prime modulus

    Returns:
        Points sorted by their (x, y, z) triple, INFINITY included once
    """
    check_modulus(p)
    roots = build_residue_table(p)

    points: List[Point] = [INFINITY]
    for x in range(p):
        r = evaluate_curve(a, b, p, x)
        if r in roots:
            y1 = roots[r]
            y2 = (p - y1) % p
            points.append(AffinePoint(x, y1))
            if y1 != y2:
                points.append(AffinePoint(x, y2))

    # Sort, then drop exact duplicates
    points.sort(key=point_key)
    unique: List[Point] = []
    for P in points:
        if not unique or unique[-1] != P:
            unique.append(P)

    return unique


def is_on_curve(a: int, b: int, p: int, P: Point) -> bool:
    """Check y^2 = x^3 + ax + b (mod p). INFINITY is always on the curve."""
    check_modulus(p)
    if P.is_infinity:
        return True
    return (P.y * P.y - evaluate_curve(a, b, p, P.x)) % p == 0
