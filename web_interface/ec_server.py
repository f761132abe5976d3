"""
HTTP front end for the elliptic curve core.

All integers travel as decimal strings. Every route is a POST with a JSON
body except the health check at "/".
"""
import argparse
import time

from flask import Flask, jsonify, request
from flask_cors import CORS

from ecfield import (CurveError, EllipticCurve, MalformedInputError, NonInvertibleError, add_points,
                     bound_to_dict, deadline_after, double_point, find_rational_points,
                     format_curve, generate_prime, hasse_bound,
                     list_curves, parse_int, parse_point, point_to_dict)
from ecfield.config import get_settings, load_settings, update_settings


def _body():
    """Decoded JSON object of the current request, or {} when absent/invalid."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _curve_limit(data, settings):
    """A request limit may only lower the configured cap."""
    cap = settings["max_curves"]
    if "limit" not in data:
        return cap
    limit = parse_int(data, "limit")
    if limit < 0:
        raise MalformedInputError(f"Limit must be non-negative, got {limit}")
    return min(limit, cap)


def _listing_response(listing):
    return {
        "count": listing.count,
        "curves": listing.curves,
        "truncated": listing.truncated,
    }


def create_app(overrides=None):
    """
    Build the Flask application.

    Args:
        overrides: Settings applied on top of the global settings

    Returns:
        Configured Flask app
    """
    app = Flask(__name__)
    CORS(app, send_wildcard=True, allow_headers=["Content-Type"])

    settings = dict(get_settings())
    if overrides:
        settings.update(overrides)
    app.config["EC_SETTINGS"] = settings

    @app.errorhandler(NonInvertibleError)
    def non_invertible(e):
        print(f"[SERVER] ✗ Arithmetic error: {e}")
        return jsonify({"status": "error", "message": str(e)}), 422

    @app.errorhandler(CurveError)
    def bad_request(e):
        print(f"[SERVER] ✗ Rejected: {e}")
        return jsonify({"status": "error", "message": str(e)}), 400

    @app.route('/')
    def home():
        return "Server running!"

    @app.route('/api/check_curve', methods=['POST'])
    def check_curve():
        data = _body()
        a, b, p = parse_int(data, "a"), parse_int(data, "b"), parse_int(data, "p")
        curve = EllipticCurve(a, b, p)

        valid = curve.is_non_singular()
        print(f"[SERVER] check_curve {curve}: {'valid' if valid else 'singular'}")
        return jsonify({"valid": valid, "curve": curve.equation()})

    @app.route('/api/valid_curves', methods=['POST'])
    def valid_curves():
        data = _body()
        p = parse_int(data, "p")
        limit = _curve_limit(data, settings)

        start_time = time.perf_counter()
        listing = list_curves(p, limit=limit,
                              should_stop=deadline_after(settings["enumeration_timeout"]))
        elapsed = time.perf_counter() - start_time

        print(f"[SERVER] valid_curves p={p}: {listing.count} curves in {elapsed:.3f}s"
              f"{' (truncated)' if listing.truncated else ''}")
        return jsonify(_listing_response(listing))

    @app.route('/api/valid_random', methods=['POST'])
    def valid_random():
        data = _body()
        bits = parse_int(data, "bits")
        limit = _curve_limit(data, settings)

        p = generate_prime(bits, settings["min_prime_bits"], settings["max_prime_bits"])
        listing = list_curves(p, limit=limit,
                              should_stop=deadline_after(settings["enumeration_timeout"]))

        print(f"[SERVER] valid_random bits={bits}: p={p}, {listing.count} curves")
        res = _listing_response(listing)
        res["prime"] = str(p)
        return jsonify(res)

    @app.route('/api/rational_points', methods=['POST'])
    def rational_points():
        data = _body()
        a, b, p = parse_int(data, "a"), parse_int(data, "b"), parse_int(data, "p")

        points = find_rational_points(a, b, p)

        print(f"[SERVER] rational_points {format_curve(a, b, p)}: {len(points)} points")
        return jsonify({"count": len(points), "points": [point_to_dict(P) for P in points]})

    @app.route('/api/add_points', methods=['POST'])
    def add():
        data = _body()
        P = parse_point(data, "p1")
        Q = parse_point(data, "q1")
        p = parse_int(data, "p")

        R = add_points(P, Q, p)
        return jsonify({"point": point_to_dict(R)})

    @app.route('/api/double_point', methods=['POST'])
    def double():
        data = _body()
        P = parse_point(data, "p1")
        a = parse_int(data, "a")
        p = parse_int(data, "p")

        R = double_point(P, a, p)
        return jsonify({"point": point_to_dict(R)})

    @app.route('/api/hasse', methods=['POST'])
    def hasse():
        data = _body()
        p = parse_int(data, "p")
        return jsonify({"bound": bound_to_dict(hasse_bound(p))})

    return app


def serve(host=None, port=None):
    """Load settings from the environment and run the development server."""
    update_settings(load_settings(env_file=".env"))
    settings = get_settings()
    host = host or settings["host"]
    port = port or settings["port"]

    app = create_app()
    print(f"[SERVER] Running on http://{host}:{port}")
    app.run(host=host, port=port, threaded=True)


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Elliptic curve HTTP server')
    parser.add_argument('--host', type=str, default=None, help='Bind address (default: EC_HOST or 0.0.0.0)')
    parser.add_argument('--port', type=int, default=None, help='Port (default: EC_PORT or 18080)')
    args = parser.parse_args()

    serve(args.host, args.port)
