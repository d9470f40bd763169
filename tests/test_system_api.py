"""
HTTP tests for the health and key listing endpoints
"""

from config.settings import settings


def test_health_reports_connected_store(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["store_status"] == "connected"
    assert body["service"] == settings.APP_NAME


def test_health_degraded_when_store_down(broken_client):
    response = broken_client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "degraded"
    assert body["store_status"] == "error"


def test_list_keys_sorted(client):
    client.post("/store/pear?a=1")
    client.post("/store/apple?a=1")

    response = client.get("/api/keys")

    assert response.status_code == 200
    assert response.json() == {"pattern": "*", "count": 2, "keys": ["apple", "pear"]}


def test_list_keys_with_pattern(client):
    client.post("/store/user:1?a=1")
    client.post("/store/user:2?a=1")
    client.post("/store/order:1?a=1")

    response = client.get("/api/keys", params={"pattern": "user:*"})

    assert response.json()["keys"] == ["user:1", "user:2"]


def test_list_keys_store_unavailable(broken_client):
    response = broken_client.get("/api/keys")

    assert response.status_code == 503
    assert response.json()["detail"]["details"]["operation"] == "keys"


def test_api_paths_do_not_shadow_entries(client):
    client.post("/store/api?x=1")

    assert client.get("/api").json() == {"x": "1"}
