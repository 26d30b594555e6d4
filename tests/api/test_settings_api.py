"""System settings endpoint tests."""

from httpx import AsyncClient

from cms.infrastructure.firebase.collections import COLLECTION_CONTENT


async def test_get_settings_returns_defaults(client: AsyncClient) -> None:
    response = await client.get("/api/v1/settings")
    assert response.status_code == 200
    data = response.json()
    assert data["whatsappNumber"] == "50687992560"
    assert data["navLinks"]["home"] == {"es": "Inicio", "en": "Home", "visible": True}
    assert data["componentButtons"]["buttonViewDetails"]["en"] == "View Details"


async def test_update_requires_admin(client: AsyncClient, visitor_headers) -> None:
    current = (await client.get("/api/v1/settings")).json()
    response = await client.put("/api/v1/settings", json=current, headers=visitor_headers)
    assert response.status_code == 403


async def test_update_round_trips(
    client: AsyncClient, firestore, admin_headers: dict[str, str]
) -> None:
    body = (await client.get("/api/v1/settings")).json()
    body["instagramUrl"] = "https://www.instagram.com/sanar"
    body["navLinks"]["journey"]["visible"] = False

    response = await client.put("/api/v1/settings", json=body, headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Settings updated successfully.",
        "errors": [],
    }
    assert firestore.collections[COLLECTION_CONTENT]["instagramUrl"]["value"]["en"] == (
        "https://www.instagram.com/sanar"
    )
    data = (await client.get("/api/v1/settings")).json()
    assert data["instagramUrl"] == "https://www.instagram.com/sanar"
    assert data["navLinks"]["journey"]["visible"] is False


async def test_invalid_update_returns_field_errors(
    client: AsyncClient, firestore, admin_headers: dict[str, str]
) -> None:
    body = (await client.get("/api/v1/settings")).json()
    body["facebookUrl"] = "facebook"
    del body["ogTitle"]

    response = await client.put("/api/v1/settings", json=body, headers=admin_headers)

    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "VALIDATION_ERROR"
    fields = {e["field"] for e in data["details"]["errors"]}
    assert {"facebookUrl", "ogTitle"} <= fields
    assert firestore.write_count == 0


async def test_store_failure_returns_502_with_message(
    client: AsyncClient, firestore, admin_headers: dict[str, str]
) -> None:
    body = (await client.get("/api/v1/settings")).json()
    firestore.fail_writes = True
    response = await client.put("/api/v1/settings", json=body, headers=admin_headers)
    assert response.status_code == 502
    data = response.json()
    assert data["success"] is False
    assert data["message"].startswith("Failed to update settings:")
