"""Finite-field elliptic curve arithmetic: validation, enumeration, points, group law."""

import sys

# Python 3.11+ caps int <-> str conversion at 4300 digits; field elements are unbounded
if hasattr(sys, "set_int_max_str_digits"):
    sys.set_int_max_str_digits(0)

from .errors import (CurveError, MalformedInputError, InvalidModulusError,
                     InvalidBitLengthError, ConfigError, NonInvertibleError)
from .mod_utils import extended_gcd, mod_inv, canonical, check_modulus
from .ecc_utils import (AffinePoint, PointAtInfinity, INFINITY, Point, point_from_triple,
                        point_key, is_non_singular, evaluate_curve, format_curve,
                        add_points, double_point)
from .residues import build_residue_table
from .points import find_rational_points, is_on_curve
from .curves import (CurveListing, non_singular_pairs, enumerate_curves, list_curves,
                     count_curves, deadline_after)
from .hasse import hasse_bound
from .curve import EllipticCurve
from .generator import is_prime_miller_rabin, check_bits, generate_prime
from .io_utils import (parse_int, parse_point, point_to_dict, bound_to_dict,
                       format_point, format_bound, save_lines)

__all__ = [
    'CurveError',
    'MalformedInputError',
    'InvalidModulusError',
    'InvalidBitLengthError',
    'ConfigError',
    'NonInvertibleError',
    'extended_gcd',
    'mod_inv',
    'canonical',
    'check_modulus',
    'AffinePoint',
    'PointAtInfinity',
    'INFINITY',
    'Point',
    'point_from_triple',
    'point_key',
    'is_non_singular',
    'evaluate_curve',
    'format_curve',
    'add_points',
    'double_point',
    'build_residue_table',
    'find_rational_points',
    'is_on_curve',
    'CurveListing',
    'non_singular_pairs',
    'enumerate_curves',
    'list_curves',
    'count_curves',
    'deadline_after',
    'hasse_bound',
    'EllipticCurve',
    'is_prime_miller_rabin',
    'check_bits',
    'generate_prime',
    'parse_int',
    'parse_point',
    'point_to_dict',
    'bound_to_dict',
    'format_point',
    'format_bound',
    'save_lines',
]
