import math

import pytest

from ecfield import is_prime_miller_rabin
from web_interface.ec_server import create_app


def post(client, route, body):
    return client.post(route, json=body)


def test_home(client):
    response = client.get('/')
    assert response.status_code == 200
    assert response.data == b"Server running!"


def test_cors_header(client):
    response = client.post('/api/hasse', json={"p": "7"}, headers={"Origin": "http://localhost:3000"})
    assert response.headers["Access-Control-Allow-Origin"] == "*"


def test_check_curve(client):
    data = post(client, '/api/check_curve', {"a": "3", "b": "1", "p": "7"}).get_json()
    assert data == {"valid": True, "curve": "y^2 = x^3 + 3x + 1 (mod 7)"}

    data = post(client, '/api/check_curve', {"a": "0", "b": "0", "p": "7"}).get_json()
    assert data["valid"] is False


def test_valid_curves(client):
    data = post(client, '/api/valid_curves', {"p": "3"}).get_json()
    assert data["count"] == 6
    assert data["curves"][0] == "y^2 = x^3 + x (mod 3)"
    assert data["curves"][-1] == "y^2 = x^3 + 2x + 2 (mod 3)"
    assert data["truncated"] is False


def test_valid_curves_request_limit(client):
    data = post(client, '/api/valid_curves', {"p": "7", "limit": "4"}).get_json()
    assert data["count"] == 4
    assert data["truncated"] is True


def test_valid_curves_configured_cap_wins():
    client = create_app({"max_curves": 3}).test_client()
    data = client.post('/api/valid_curves', json={"p": "7", "limit": "100"}).get_json()
    assert data["count"] == 3
    assert data["truncated"] is True


def test_valid_random(client):
    data = post(client, '/api/valid_random', {"bits": "5", "limit": "10"}).get_json()
    p = int(data["prime"])
    assert p.bit_length() == 5 and is_prime_miller_rabin(p)
    assert data["count"] == 10
    assert all(curve.endswith(f"(mod {p})") for curve in data["curves"])


@pytest.mark.parametrize("bits", ["1", "0", "-4"])
def test_valid_random_rejects_bits(client, bits):
    response = post(client, '/api/valid_random', {"bits": bits})
    assert response.status_code == 400
    assert response.get_json()["status"] == "error"


def test_rational_points(client):
    data = post(client, '/api/rational_points', {"a": "3", "b": "1", "p": "7"}).get_json()
    assert data["count"] == 12
    assert data["points"][0] == {"x": "0", "y": "1", "z": "0"}
    assert data["points"][1] == {"x": "0", "y": "1", "z": "1"}
    assert data["points"][-1] == {"x": "6", "y": "5", "z": "1"}


def test_add_points(client):
    body = {"p1": {"x": "1", "y": "2", "z": "1"}, "q1": {"x": "3", "y": "4", "z": "1"}, "p": "7"}
    assert post(client, '/api/add_points', body).get_json() == {"point": {"x": "4", "y": "2", "z": "1"}}


def test_add_points_identity(client):
    body = {"p1": {"x": "1", "y": "2", "z": "1"}, "q1": {"x": "0", "y": "1", "z": "0"}, "p": "7"}
    assert post(client, '/api/add_points', body).get_json()["point"] == {"x": "1", "y": "2", "z": "1"}


def test_double_point(client):
    body = {"p1": {"x": "1", "y": "2", "z": "1"}, "a": "2", "p": "7"}
    assert post(client, '/api/double_point', body).get_json() == {"point": {"x": "0", "y": "1", "z": "1"}}


def test_hasse(client):
    assert post(client, '/api/hasse', {"p": "7"}).get_json() == {"bound": {"l": "3", "r": "13"}}


@pytest.mark.parametrize("route, body", [
    ('/api/valid_curves', {}),
    ('/api/valid_curves', {"p": "seven"}),
    ('/api/valid_curves', {"p": "1"}),
    ('/api/valid_curves', {"p": "7", "limit": "-1"}),
    ('/api/rational_points', {"a": "3", "p": "7"}),
    ('/api/add_points', {"p1": {"x": "1", "y": "2", "z": "1"}, "p": "7"}),
    ('/api/double_point', {"p1": {"x": "1", "y": "2", "z": "5"}, "a": "2", "p": "7"}),
    ('/api/hasse', {"p": 7.5}),
])
def test_malformed_input(client, route, body):
    response = post(client, route, body)
    assert response.status_code == 400
    assert response.get_json()["status"] == "error"


def test_invalid_json(client):
    response = client.post('/api/hasse', data="not json", content_type="application/json")
    assert response.status_code == 400


def test_non_invertible_denominator(client):
    body = {"p1": {"x": "1", "y": "0", "z": "1"}, "q1": {"x": "3", "y": "1", "z": "1"}, "p": "4"}
    response = post(client, '/api/add_points', body)
    assert response.status_code == 422
    assert "no inverse" in response.get_json()["message"]


def test_hasse_accepts_numbers_beyond_default_str_digit_limit(client):
    p = int("1" + "0" * 4400 + "7")
    response = post(client, '/api/hasse', {"p": str(p)})
    assert response.status_code == 200

    bound = response.get_json()["bound"]
    s = math.isqrt(4 * p)
    assert int(bound["l"]) == p + 1 - s
    assert int(bound["r"]) == p + 1 + s


def test_check_curve_formats_huge_modulus(client):
    p = "1" + "0" * 4400 + "7"
    data = post(client, '/api/check_curve', {"a": "1", "b": "0", "p": p}).get_json()
    assert data["curve"] == f"y^2 = x^3 + x (mod {p})"


def test_valid_random_rejects_bits_above_configured_max(client):
    response = post(client, '/api/valid_random', {"bits": "65"})
    assert response.status_code == 400
    assert "at most 64" in response.get_json()["message"]
