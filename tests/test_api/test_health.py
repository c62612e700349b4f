"""
Tests for health and monitoring endpoints.
"""

from fastapi.testclient import TestClient


def test_health_check(test_client: TestClient):
    """Test health endpoint returns correct structure."""
    response = test_client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()

    assert data["status"] == "healthy"
    assert data["symptoms_indexed"] == 10
    assert data["conditions_indexed"] == 5
    assert "version" in data


def test_root_endpoint(test_client: TestClient):
    """Test root endpoint returns service info."""
    response = test_client.get("/")

    assert response.status_code == 200
    data = response.json()

    assert "service" in data
    assert "version" in data


def test_metrics_endpoint(test_client: TestClient, api_key_headers: dict):
    """Metrics are public and include assistant counters."""
    test_client.post("/api/v1/assistant/symptoms", json={"symptoms": ["cough"]}, headers=api_key_headers)

    response = test_client.get("/api/v1/metrics")

    assert response.status_code == 200
    assert "lifeline_symptom_assessments_total" in response.text


def test_process_time_header(test_client: TestClient):
    response = test_client.get("/api/v1/health")
    assert "X-Process-Time" in response.headers
