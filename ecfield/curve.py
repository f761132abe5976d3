"""
EllipticCurve value object bundling (a, b, p) with the curve operations.
"""

from dataclasses import dataclass
from typing import List, Tuple

from .ecc_utils import (Point, add_points, double_point, evaluate_curve,
                        format_curve, is_non_singular)
from .hasse import hasse_bound
from .mod_utils import check_modulus
from .points import find_rational_points, is_on_curve


@dataclass(frozen=True)
class EllipticCurve:
    """
    The curve y^2 = x^3 + ax + b over GF(p).

    Singular parameters are accepted; check is_non_singular() when it
    matters. Coefficients are reduced into [0, p) on construction.
    """
    a: int
    b: int
    p: int

    def __post_init__(self):
        check_modulus(self.p)
        object.__setattr__(self, "a", self.a % self.p)
        object.__setattr__(self, "b", self.b % self.p)

    def is_non_singular(self) -> bool:
        return is_non_singular(self.a, self.b, self.p)

    def equation(self) -> str:
        return format_curve(self.a, self.b, self.p)

    def evaluate(self, x: int) -> int:
        return evaluate_curve(self.a, self.b, self.p, x)

    def is_on_curve(self, P: Point) -> bool:
        return is_on_curve(self.a, self.b, self.p, P)

    def add(self, P: Point, Q: Point) -> Point:
        return add_points(P, Q, self.p)

    def double(self, P: Point) -> Point:
        return double_point(P, self.a, self.p)

    def rational_points(self) -> List[Point]:
        return find_rational_points(self.a, self.b, self.p)

    def hasse_bound(self) -> Tuple[int, int]:
        return hasse_bound(self.p)

    def __str__(self) -> str:
        return self.equation()
