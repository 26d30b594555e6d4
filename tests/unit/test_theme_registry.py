"""Tests for saved themes, presets, and the runtime style block."""

import pytest

from cms.application.dtos.theme import PredefinedTheme, ThemeColors
from cms.application.services import ThemeRegistry
from cms.application.services.theme_presets import DEFAULT_THEME, PRESET_THEMES, get_preset
from cms.application.services.theme_registry import render_theme_css
from cms.core.constants import ACTIVE_THEME_LOCAL_KEY
from cms.domain.exceptions import ContentStoreException, ResourceNotFoundException
from cms.infrastructure.firebase.collections import COLLECTION_THEMES
from cms.infrastructure.firebase.repositories import FirestoreThemeRepository


@pytest.fixture
def local_storage() -> dict[str, str]:
    return {}


@pytest.fixture
def registry(firestore, local_storage) -> ThemeRegistry:
    return ThemeRegistry(FirestoreThemeRepository(firestore), local_storage=local_storage)


def _sunset_colors() -> ThemeColors:
    return get_preset("sunset").colors


async def test_save_assigns_id_and_stores_whole_document(registry, firestore) -> None:
    theme = await registry.save("Atardecer", _sunset_colors())
    assert theme.id
    doc = firestore.collections[COLLECTION_THEMES][theme.id]
    assert doc["name"] == "Atardecer"
    assert set(doc["colors"]) == {"light", "dark"}
    assert "cardForeground" in doc["colors"]["light"]
    assert "id" not in doc


async def test_list_sorted_by_name_and_skips_malformed(registry, firestore) -> None:
    await registry.save("zeta", _sunset_colors())
    await registry.save("Alpha", _sunset_colors())
    firestore.collections[COLLECTION_THEMES]["broken"] = {"name": "Broken"}
    assert [t.name for t in await registry.list()] == ["Alpha", "zeta"]


async def test_get_falls_back_to_presets(registry) -> None:
    assert (await registry.get("oceanic")).name == "Oceanic"
    with pytest.raises(ResourceNotFoundException):
        await registry.get("missing")


async def test_update_replaces_existing_theme(registry) -> None:
    theme = await registry.save("Mine", _sunset_colors())
    updated = PredefinedTheme(id=theme.id, name="Renamed", colors=DEFAULT_THEME.colors)
    await registry.update(updated)
    assert (await registry.get(theme.id)) == updated


async def test_update_unknown_theme_raises(registry) -> None:
    with pytest.raises(ResourceNotFoundException):
        await registry.update(PredefinedTheme(id="nope", name="x", colors=DEFAULT_THEME.colors))


async def test_apply_is_idempotent(registry) -> None:
    first = registry.apply(_sunset_colors())
    second = registry.apply(_sunset_colors())
    assert first == second == registry.style_block.css
    assert registry.style_block.render().startswith('<style id="dynamic-theme-styles">')


async def test_select_remembers_active_theme(registry, local_storage) -> None:
    theme = await registry.save("Mine", _sunset_colors())
    await registry.select(theme.id)
    assert local_storage[ACTIVE_THEME_LOCAL_KEY] == theme.id
    assert (await registry.active_theme()).id == theme.id
    assert registry.style_block.css == render_theme_css(theme.colors)


async def test_deleting_active_theme_clears_selection(registry, local_storage) -> None:
    theme = await registry.save("Mine", _sunset_colors())
    await registry.select(theme.id)
    await registry.delete(theme.id)
    assert ACTIVE_THEME_LOCAL_KEY not in local_storage
    assert await registry.active_theme() is None


async def test_active_theme_deleted_elsewhere_reads_none(registry, local_storage) -> None:
    local_storage[ACTIVE_THEME_LOCAL_KEY] = "gone"
    assert await registry.active_theme() is None


async def test_write_failure_raises(registry, firestore) -> None:
    firestore.fail_writes = True
    with pytest.raises(ContentStoreException):
        await registry.save("Mine", _sunset_colors())


def test_render_css_declares_both_modes() -> None:
    css = render_theme_css(DEFAULT_THEME.colors)
    assert css.startswith(":root {")
    assert "  --light-card-foreground: 20 14.3% 4.1%;" in css
    assert "  --dark-background: 140 15% 5%;" in css
    assert css.count("--light-") == css.count("--dark-") == 19


def test_presets_are_valid_and_unique() -> None:
    ids = [t.id for t in PRESET_THEMES]
    assert ids[0] == "default"
    assert len(ids) == len(set(ids))


def test_colors_reject_non_hsl_values() -> None:
    raw = DEFAULT_THEME.colors.model_dump(by_alias=True)
    raw["light"]["primary"] = "#ff0000"
    with pytest.raises(ValueError):
        ThemeColors.model_validate(raw)
