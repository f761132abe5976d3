"""
Encoding at the boundary: decimal strings in, decimal strings out.

Big integers travel as decimal strings so JSON consumers never round them.
"""

import re
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Tuple, Union

from .ecc_utils import Point, point_from_triple
from .errors import MalformedInputError

_DECIMAL = re.compile(r"^[+-]?\d+$")


def parse_int(data: Mapping[str, Any], key: str) -> int:
    """
    Read an integer field given as a decimal string or a JSON integer.

    Args:
        data: Decoded JSON object
        key: Field name

    Returns:
        The integer value

    Raises:
        MalformedInputError: If the field is missing or not an integer
    """
    if not isinstance(data, Mapping):
        raise MalformedInputError(f"Expected an object holding '{key}'")
    if key not in data:
        raise MalformedInputError(f"Missing field '{key}'")

    value = data[key]
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool):
        raise MalformedInputError(f"Field '{key}' must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _DECIMAL.match(value.strip()):
        try:
            return int(value.strip())
        except ValueError:
            raise MalformedInputError(f"Field '{key}' is too long to convert") from None

    raise MalformedInputError(f"Field '{key}' must be an integer, got {value!r}")


def parse_point(data: Mapping[str, Any], key: str) -> Point:
    """Read a {"x", "y", "z"} object into a point variant."""
    if not isinstance(data, Mapping) or key not in data:
        raise MalformedInputError(f"Missing field '{key}'")

    raw = data[key]
    return point_from_triple(parse_int(raw, "x"), parse_int(raw, "y"), parse_int(raw, "z"))


def point_to_dict(P: Point) -> Dict[str, str]:
    x, y, z = P.as_triple()
    return {"x": str(x), "y": str(y), "z": str(z)}


def bound_to_dict(bound: Tuple[int, int]) -> Dict[str, str]:
    lo, hi = bound
    return {"l": str(lo), "r": str(hi)}


def format_point(P: Point) -> str:
    """Console form, e.g. "(3, 4, 1)"."""
    x, y, z = P.as_triple()
    return f"({x}, {y}, {z})"


def format_bound(bound: Tuple[int, int]) -> str:
    lo, hi = bound
    return f"[{lo}, {hi}]"


def save_lines(path: Union[str, Path], lines: Iterable[str]) -> int:
    """
    Write one entry per line, streaming from `lines`.

    Returns:
        Number of lines written

    Raises:
        OSError: If the file cannot be opened
    """
    count = 0
    with Path(path).open('w') as f:
        for line in lines:
            f.write(f"{line}\n")
            count += 1
    return count
