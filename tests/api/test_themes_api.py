"""Theme endpoint tests."""

from httpx import AsyncClient

from cms.application.services.theme_presets import get_preset


def _colors() -> dict:
    return get_preset("forest").colors.model_dump(by_alias=True)


async def test_presets_available_without_saved_themes(client: AsyncClient) -> None:
    assert (await client.get("/api/v1/themes")).json() == []
    presets = await client.get("/api/v1/themes/presets")
    assert presets.status_code == 200
    assert [t["id"] for t in presets.json()] == ["default", "sunset", "oceanic", "forest", "slate"]


async def test_write_requires_admin(client: AsyncClient, visitor_headers) -> None:
    response = await client.post(
        "/api/v1/themes", json={"name": "Mine", "colors": _colors()}, headers=visitor_headers
    )
    assert response.status_code == 403


async def test_theme_crud(client: AsyncClient, admin_headers: dict[str, str]) -> None:
    created = await client.post(
        "/api/v1/themes", json={"name": "Bosque", "colors": _colors()}, headers=admin_headers
    )
    assert created.status_code == 201
    theme = created.json()
    assert theme["name"] == "Bosque"
    assert theme["colors"]["light"]["primaryForeground"]

    listed = await client.get("/api/v1/themes")
    assert [t["id"] for t in listed.json()] == [theme["id"]]

    renamed = await client.put(
        f"/api/v1/themes/{theme['id']}",
        json={"name": "Bosque claro", "colors": _colors()},
        headers=admin_headers,
    )
    assert renamed.status_code == 200
    assert (await client.get(f"/api/v1/themes/{theme['id']}")).json()["name"] == "Bosque claro"

    deleted = await client.delete(f"/api/v1/themes/{theme['id']}", headers=admin_headers)
    assert deleted.status_code == 204
    assert (await client.get(f"/api/v1/themes/{theme['id']}")).status_code == 404


async def test_update_unknown_theme_returns_404(
    client: AsyncClient, admin_headers: dict[str, str]
) -> None:
    response = await client.put(
        "/api/v1/themes/nope", json={"name": "x", "colors": _colors()}, headers=admin_headers
    )
    assert response.status_code == 404


async def test_invalid_colors_rejected(client: AsyncClient, admin_headers: dict[str, str]) -> None:
    colors = _colors()
    colors["dark"]["ring"] = "red"
    response = await client.post(
        "/api/v1/themes", json={"name": "Bad", "colors": colors}, headers=admin_headers
    )
    assert response.status_code == 422


async def test_stylesheet_for_preset(client: AsyncClient) -> None:
    response = await client.get("/api/v1/themes/sunset/stylesheet")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/css")
    assert response.text.startswith(":root {")
    assert "--dark-primary-foreground:" in response.text
