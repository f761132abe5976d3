"""
Enumeration of non-singular curves y^2 = x^3 + ax + b over GF(p).

Pairs (a, b) are swept in row-major order (a outer, b inner), so output
order is fixed for a given p. The sweep is O(p^2); callers bound it with
a result limit and/or a stop callback checked between curves.
"""

import time
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Tuple

from .ecc_utils import format_curve, is_non_singular
from .errors import MalformedInputError
from .mod_utils import check_modulus

StopCheck = Callable[[], bool]


@dataclass
class CurveListing:
    """Result of a bounded enumeration."""
    prime: int
    curves: List[str] = field(default_factory=list)
    truncated: bool = False

    @property
    def count(self) -> int:
        return len(self.curves)


def _check_limit(limit: Optional[int]) -> None:
    if limit is not None and limit < 0:
        raise MalformedInputError(f"Limit must be non-negative, got {limit}")


def non_singular_pairs(p: int) -> Iterator[Tuple[int, int]]:
    """Yield every (a, b) in [0, p)^2 with a non-zero discriminant."""
    check_modulus(p)
    for a in range(p):
        for b in range(p):
            if is_non_singular(a, b, p):
                yield a, b


def enumerate_curves(p: int, limit: Optional[int] = None,
                     should_stop: Optional[StopCheck] = None) -> Iterator[str]:
    """
    Lazily yield formatted non-singular curves for p.

    Args:
        p: Prime modulus
        limit: Stop after this many curves (None = no cap)
        should_stop: Called before each curve; returning True ends the sweep

    Yields:
        Curve equations, e.g. "y^2 = x^3 + x + 1 (mod 5)"
    """
    _check_limit(limit)
    emitted = 0
    for a, b in non_singular_pairs(p):
        if limit is not None and emitted >= limit:
            return
        if should_stop is not None and should_stop():
            return
        yield format_curve(a, b, p)
        emitted += 1


def list_curves(p: int, limit: Optional[int] = None,
                should_stop: Optional[StopCheck] = None) -> CurveListing:
    """
    Materialize enumerate_curves() and record whether it was cut short.

    truncated is set only when at least one more curve existed past the
    point where the limit or should_stop ended the sweep.
    """
    _check_limit(limit)
    listing = CurveListing(prime=p)

    for a, b in non_singular_pairs(p):
        if limit is not None and listing.count >= limit:
            listing.truncated = True
            break
        if should_stop is not None and should_stop():
            listing.truncated = True
            break
        listing.curves.append(format_curve(a, b, p))

    return listing


def count_curves(p: int) -> int:
    """Number of non-singular (a, b) pairs, without formatting them."""
    return sum(1 for _ in non_singular_pairs(p))


def deadline_after(seconds: float) -> StopCheck:
    """
    Build a should_stop callback that fires once `seconds` have elapsed.

    A non-positive budget never fires.
    """
    if seconds <= 0:
        return lambda: False

    deadline = time.perf_counter() + seconds
    return lambda: time.perf_counter() >= deadline
