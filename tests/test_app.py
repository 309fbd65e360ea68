from prometheus_client import REGISTRY

from skillswap.main import UNMATCHED_ENDPOINT
from tests.conftest import API


def request_count(method, endpoint, status):
    labels = {"method": method, "endpoint": endpoint, "status": str(status)}
    return REGISTRY.get_sample_value("skillswap_request_count_total", labels) or 0


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_metrics_endpoint(client):
    client.get("/health")
    response = client.get("/metrics/")
    assert response.status_code == 200
    assert "skillswap_request_count" in response.text


def test_metrics_label_requests_by_full_route_template(client, alice):
    before_skills = request_count("GET", f"{API}/skills", 200)
    before_ratings = request_count("GET", f"{API}/ratings", 200)
    before_user = request_count("GET", f"{API}/users/{{user_id}}", 200)

    client.get(f"{API}/skills")
    client.get(f"{API}/ratings")
    client.get(f"{API}/users/{alice['id']}", headers=alice["headers"])

    assert request_count("GET", f"{API}/skills", 200) == before_skills + 1
    assert request_count("GET", f"{API}/ratings", 200) == before_ratings + 1
    assert request_count("GET", f"{API}/users/{{user_id}}", 200) == before_user + 1
    assert request_count("GET", "", 200) == 0


def test_unmatched_paths_share_one_label(client):
    before = request_count("GET", UNMATCHED_ENDPOINT, 404)

    for i in range(5):
        assert client.get(f"/scan/{i}").status_code == 404

    assert request_count("GET", UNMATCHED_ENDPOINT, 404) == before + 5
    assert all(request_count("GET", f"/scan/{i}", 404) == 0 for i in range(5))


def test_unknown_route_uses_error_envelope(client):
    response = client.get(f"{API}/nothing-here")
    assert response.status_code == 404
    assert response.json()["success"] is False
    assert response.json()["error"] == "Not Found"


def test_malformed_body_is_a_validation_error(client):
    response = client.post(f"{API}/auth/login", json={"email": "a@x.com"})
    assert response.status_code == 400
    assert response.json()["message"] == "Validation failed"
    assert response.json()["error"].startswith("password")
