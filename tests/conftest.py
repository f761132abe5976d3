import pytest

from ecfield import EllipticCurve
from web_interface.ec_server import create_app


def _brute_force_points(a, b, p):
    """Affine solutions of y^2 = x^3 + ax + b by checking every (x, y)."""
    return {(x, y) for x in range(p) for y in range(p)
            if (y * y - (x ** 3 + a * x + b)) % p == 0}


@pytest.fixture
def brute_force_points():
    return _brute_force_points


@pytest.fixture
def scenario_a():
    return EllipticCurve(3, 1, 7)


@pytest.fixture
def app():
    return create_app({"max_curves": 1000, "enumeration_timeout": 0})


@pytest.fixture
def client(app):
    return app.test_client()
