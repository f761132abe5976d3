"""
Client for the elliptic curve HTTP server.

Mirrors each route with a method returning Python values.
"""
import requests

from ecfield import CurveError, Point, parse_int, parse_point, point_to_dict

DEFAULT_URL = "http://localhost:18080"


class ECClient:
    def __init__(self, base_url=DEFAULT_URL, timeout=30.0):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    def _post(self, route, payload):
        response = requests.post(f"{self.base_url}{route}", json=payload, timeout=self.timeout)
        if not response.ok:
            raise CurveError(f"{route} failed ({response.status_code}): {_error_message(response)}")
        return response.json()

    def check_curve(self, a, b, p) -> bool:
        data = self._post('/api/check_curve', {"a": str(a), "b": str(b), "p": str(p)})
        return data["valid"]

    def valid_curves(self, p, limit=None):
        """Returns (curves, truncated)."""
        payload = {"p": str(p)}
        if limit is not None:
            payload["limit"] = str(limit)
        data = self._post('/api/valid_curves', payload)
        return data["curves"], data["truncated"]

    def valid_random(self, bits, limit=None):
        """Returns (prime, curves, truncated)."""
        payload = {"bits": str(bits)}
        if limit is not None:
            payload["limit"] = str(limit)
        data = self._post('/api/valid_random', payload)
        return parse_int(data, "prime"), data["curves"], data["truncated"]

    def rational_points(self, a, b, p):
        data = self._post('/api/rational_points', {"a": str(a), "b": str(b), "p": str(p)})
        return [parse_point({"point": raw}, "point") for raw in data["points"]]

    def add_points(self, P: Point, Q: Point, p) -> Point:
        data = self._post('/api/add_points',
                          {"p1": point_to_dict(P), "q1": point_to_dict(Q), "p": str(p)})
        return parse_point(data, "point")

    def double_point(self, P: Point, a, p) -> Point:
        data = self._post('/api/double_point', {"p1": point_to_dict(P), "a": str(a), "p": str(p)})
        return parse_point(data, "point")

    def hasse_bound(self, p):
        data = self._post('/api/hasse', {"p": str(p)})
        bound = data["bound"]
        return parse_int(bound, "l"), parse_int(bound, "r")


def _error_message(response):
    try:
        return response.json().get("message", response.text)
    except ValueError:
        return response.text
