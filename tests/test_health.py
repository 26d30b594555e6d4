"""Smoke tests for health and app wiring."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data.get("status") == "ok"
    assert data.get("content_store") == "available"


async def test_health_reports_unconfigured_store(client: AsyncClient, monkeypatch) -> None:
    """Without Firestore the service still answers and reports defaults-only mode."""
    monkeypatch.setattr("cms.api.v1.endpoints.health.get_firestore_client", lambda: None)
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json()["content_store"] == "unavailable"


async def test_request_id_is_echoed(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "req-42"})
    assert response.headers["x-request-id"] == "req-42"


async def test_request_id_is_generated(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health")
    assert len(response.headers["x-request-id"]) == 36
