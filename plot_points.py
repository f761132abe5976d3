#!/usr/bin/env python3
"""
Scatter plot of the rational points of y^2 = x^3 + ax + b over GF(p).
"""

import argparse
import sys
from pathlib import Path

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from ecfield import CurveError, find_rational_points, format_curve, hasse_bound


def plot_rational_points(a: int, b: int, p: int, output: Path) -> Path:
    """
    Render the affine points of a curve and save them as a PNG.

    Args:
        a: Coefficient of x
        b: Constant term
        p: Prime modulus
        output: Destination file

    Returns:
        Path of the written image
    """
    points = find_rational_points(a, b, p)
    affine = [P for P in points if not P.is_infinity]
    lo, hi = hasse_bound(p)

    fig, ax = plt.subplots(figsize=(8, 8))
    ax.scatter([P.x for P in affine], [P.y for P in affine], s=18, color='#3498db')
    ax.set_xlim(-0.5, p - 0.5)
    ax.set_ylim(-0.5, p - 0.5)
    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.set_title(f"{format_curve(a % p, b % p, p)}\n"
                 f"{len(points)} points incl. O (Hasse [{lo}, {hi}])")
    ax.grid(True, alpha=0.3)

    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output, dpi=150, bbox_inches='tight')
    plt.close(fig)
    return output


def main(argv=None):
    parser = argparse.ArgumentParser(description='Plot rational points of a curve')
    parser.add_argument('a', type=int)
    parser.add_argument('b', type=int)
    parser.add_argument('p', type=int)
    parser.add_argument('--output', type=Path, default=None,
                        help='PNG file (default: curve_<a>_<b>_<p>.png)')
    args = parser.parse_args(argv)

    output = args.output or Path(f"curve_{args.a}_{args.b}_{args.p}.png")
    try:
        path = plot_rational_points(args.a, args.b, args.p, output)
    except CurveError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"Saved plot to {path}")


if __name__ == "__main__":
    main()
