"""
Hasse's theorem: |N - (p + 1)| <= 2*sqrt(p) for a curve with N points.
"""

import math
from typing import Tuple

from .mod_utils import check_modulus


def hasse_bound(p: int) -> Tuple[int, int]:
    """
    Interval guaranteed to contain the point count of any curve over GF(p).

    floor(2*sqrt(p)) == isqrt(4p), which avoids floating point for large p.

    Args:
        p: Prime modulus

    Returns:
        (lower, upper)
    """
    check_modulus(p)
    s = math.isqrt(4 * p)
    return p + 1 - s, p + 1 + s
