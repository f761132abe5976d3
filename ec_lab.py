#!/usr/bin/env python3
"""
Elliptic Curves Lab - command line front end.

Subcommands run a single operation; `menu` starts the interactive menu.

Examples:
    ec_lab.py curves 5
    ec_lab.py random 8 --limit 100 --save
    ec_lab.py points 3 1 7
    ec_lab.py add 1 2 1 3 4 1 7
    ec_lab.py double 1 2 2 7
    ec_lab.py hasse 7
"""

import argparse
import sys
from pathlib import Path

from ecfield import (AffinePoint, CurveError, add_points, deadline_after, double_point,
                     find_rational_points, format_bound, format_curve,
                     format_point, generate_prime, hasse_bound, is_non_singular,
                     list_curves, point_from_triple, save_lines)
from ecfield.config import get_settings, load_settings, update_settings


def report_curves(p, limit, save, filename, settings):
    """Print (or save) the non-singular curves for p and return how many were found."""
    listing = list_curves(p, limit=limit,
                          should_stop=deadline_after(settings["enumeration_timeout"]))

    saved = False
    if save:
        path = Path(settings["output_dir"]) / filename
        try:
            save_lines(path, listing.curves)
            print(f"Saved curves to {path}")
            saved = True
        except OSError:
            print("Failed to open file. Continue without saving!")

    if not saved:
        for curve in listing.curves:
            print(curve)
    print(f"\nfound {listing.count} non-singular curves!")
    if listing.truncated:
        print(f"(stopped early: limit {limit} or time budget reached)")
    return listing.count


def report_points(a, b, p):
    points = find_rational_points(a, b, p)
    print(format_curve(a % p, b % p, p))
    for P in points:
        print(format_point(P))
    lo, hi = hasse_bound(p)
    print(f"\n{len(points)} rational points (Hasse bound [{lo}, {hi}])")
    return points


# --- subcommands ---

def cmd_curves(args, settings):
    limit = args.limit if args.limit is not None else settings["max_curves"]
    report_curves(args.p, limit, args.save, "valid_curves.txt", settings)


def cmd_random(args, settings):
    p = generate_prime(args.bits, settings["min_prime_bits"], settings["max_prime_bits"])
    print(f"Using p: {p}")
    limit = args.limit if args.limit is not None else settings["max_curves"]
    report_curves(p, limit, args.save, "valid_curves_random.txt", settings)


def cmd_points(args, settings):
    report_points(args.a, args.b, args.p)


def cmd_add(args, settings):
    P = point_from_triple(args.x1, args.y1, args.z1)
    Q = point_from_triple(args.x2, args.y2, args.z2)
    print(format_point(add_points(P, Q, args.p)))


def cmd_double(args, settings):
    print(format_point(double_point(AffinePoint(args.x, args.y), args.a, args.p)))


def cmd_hasse(args, settings):
    print(format_bound(hasse_bound(args.p)))


def cmd_check(args, settings):
    valid = is_non_singular(args.a, args.b, args.p)
    print(f"{format_curve(args.a % args.p, args.b % args.p, args.p)}: "
          f"{'non-singular' if valid else 'singular'}")


def cmd_serve(args, settings):
    from web_interface.ec_server import serve
    serve(args.host, args.port)


def cmd_menu(args, settings):
    run_menu(settings)


# --- interactive menu ---

MENU = """* * * Elliptic Curves Lab * * *
[1] Find valid curves.
[2] Find valid curves for a random prime.
[3] Find rational points.
[4] Add two points.
[5] Double a point.
[6] Hasse bound.
[0] Exit."""


def ask_int(prompt, input_fn=input):
    while True:
        raw = input_fn(prompt)
        try:
            return int(raw.strip())
        except ValueError:
            print(f"'{raw}' is not an integer, try again.")


def run_menu(settings, input_fn=input):
    """Loop over the numbered menu until the user picks 0 (or input runs out)."""
    ask = lambda prompt: ask_int(prompt, input_fn)

    while True:
        print(MENU)
        try:
            option = ask("Select an option: ")
        except EOFError:
            return
        print()

        try:
            if option == 0:
                return
            elif option == 1:
                p = ask("Enter a prime number: ")
                report_curves(p, settings["max_curves"], True, "valid_curves.txt", settings)
            elif option == 2:
                bits = ask("Enter number of bits: ")
                while bits < settings["min_prime_bits"]:
                    print(f"Please, enter a number of at least {settings['min_prime_bits']}!")
                    bits = ask("Enter number of bits: ")
                p = generate_prime(bits, settings["min_prime_bits"], settings["max_prime_bits"])
                print(f"Using p: {p}")
                report_curves(p, settings["max_curves"], True, "valid_curves_random.txt", settings)
            elif option == 3:
                a = ask("Enter value of a: ")
                b = ask("Enter value of b: ")
                p = ask("Enter a prime number: ")
                report_points(a, b, p)
            elif option == 4:
                print("Enter Point P1")
                P = point_from_triple(ask("Enter value of x1: "), ask("Enter value of y1: "),
                                      ask("Enter value of z1: "))
                print("Enter Point Q1")
                Q = point_from_triple(ask("Enter value of x2: "), ask("Enter value of y2: "),
                                      ask("Enter value of z2: "))
                p = ask("Enter a prime number: ")
                print(format_point(add_points(P, Q, p)))
            elif option == 5:
                print("Enter Point P1")
                P = AffinePoint(ask("Enter value of x: "), ask("Enter value of y: "))
                a = ask("Enter value of a: ")
                p = ask("Enter a prime number: ")
                print(format_point(double_point(P, a, p)))
            elif option == 6:
                p = ask("Enter a prime number: ")
                print(format_bound(hasse_bound(p)))
            else:
                print("Please select a valid option.")
        except CurveError as e:
            print(f"Error: {e}")
        except EOFError:
            return
        print()


def build_parser():
    parser = argparse.ArgumentParser(description='Elliptic curves over GF(p)')
    sub = parser.add_subparsers(dest='command', required=True)

    s = sub.add_parser('curves', help='List non-singular curves for a prime')
    s.add_argument('p', type=int, help='Prime modulus')
    s.add_argument('--limit', type=int, default=None, help='Maximum curves to list')
    s.add_argument('--save', action='store_true', help='Write curves to valid_curves.txt')
    s.set_defaults(func=cmd_curves)

    s = sub.add_parser('random', help='List non-singular curves for a random prime')
    s.add_argument('bits', type=int, help='Bit length of the prime')
    s.add_argument('--limit', type=int, default=None, help='Maximum curves to list')
    s.add_argument('--save', action='store_true', help='Write curves to valid_curves_random.txt')
    s.set_defaults(func=cmd_random)

    s = sub.add_parser('points', help='Find all rational points of a curve')
    for name in ('a', 'b', 'p'):
        s.add_argument(name, type=int)
    s.set_defaults(func=cmd_points)

    s = sub.add_parser('add', help='Add two points given as x y z triples')
    for name in ('x1', 'y1', 'z1', 'x2', 'y2', 'z2', 'p'):
        s.add_argument(name, type=int)
    s.set_defaults(func=cmd_add)

    s = sub.add_parser('double', help='Double an affine point')
    for name in ('x', 'y', 'a', 'p'):
        s.add_argument(name, type=int)
    s.set_defaults(func=cmd_double)

    s = sub.add_parser('hasse', help='Hasse interval for a prime')
    s.add_argument('p', type=int)
    s.set_defaults(func=cmd_hasse)

    s = sub.add_parser('check', help='Check that a curve is non-singular')
    for name in ('a', 'b', 'p'):
        s.add_argument(name, type=int)
    s.set_defaults(func=cmd_check)

    s = sub.add_parser('serve', help='Run the HTTP server')
    s.add_argument('--host', type=str, default=None)
    s.add_argument('--port', type=int, default=None)
    s.set_defaults(func=cmd_serve)

    s = sub.add_parser('menu', help='Interactive menu')
    s.set_defaults(func=cmd_menu)

    return parser


def main(argv=None):
    """Main entry point for the lab CLI."""
    args = build_parser().parse_args(argv)

    try:
        update_settings(load_settings(env_file=".env"))
        args.func(args, get_settings())
    except CurveError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
