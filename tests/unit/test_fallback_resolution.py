"""Tests for content value objects and the fallback chain (requested -> es -> default)."""

import pytest

from cms.domain.fallback import resolve, resolve_slot
from cms.domain.value_objects.content import (
    LocalizedValue,
    ScalarValue,
    as_localized,
    content_value_from_raw,
)


class TestContentValueFromRaw:
    """Stored `value` fields map onto the tagged variant; unknown shapes read as absent."""

    def test_string_is_scalar(self) -> None:
        assert content_value_from_raw("Hola") == ScalarValue("Hola")

    def test_mapping_is_localized(self) -> None:
        value = content_value_from_raw({"es": "Hola", "en": "Hello"})
        assert isinstance(value, LocalizedValue)
        assert value.text("en") == "Hello"

    @pytest.mark.parametrize("raw", [None, 3, 1.5, ["es"], True])
    def test_unrecognized_shapes_are_absent(self, raw) -> None:
        assert content_value_from_raw(raw) is None


class TestResolve:
    def test_absent_returns_fallback(self) -> None:
        assert resolve("en", None, "Default") == "Default"

    def test_requested_language_wins(self) -> None:
        stored = LocalizedValue({"es": "Inicio", "en": "Home"})
        assert resolve("en", stored, "x") == "Home"
        assert resolve("es", stored, "x") == "Inicio"

    def test_missing_language_falls_back_to_spanish(self) -> None:
        stored = LocalizedValue({"es": "Inicio"})
        assert resolve("en", stored, "Home") == "Inicio"

    def test_empty_strings_count_as_missing(self) -> None:
        stored = LocalizedValue({"es": "", "en": ""})
        assert resolve("en", stored, "Home") == "Home"
        stored = LocalizedValue({"es": "Inicio", "en": ""})
        assert resolve("en", stored, "Home") == "Inicio"

    def test_empty_map_returns_fallback(self) -> None:
        assert resolve("es", LocalizedValue(), "Inicio") == "Inicio"

    def test_scalar_ignores_language(self) -> None:
        stored = ScalarValue("Legacy text")
        assert resolve("es", stored, "x") == "Legacy text"
        assert resolve("en", stored, "x") == "Legacy text"

    def test_empty_scalar_is_returned_as_stored(self) -> None:
        assert resolve("en", ScalarValue(""), "Default") == ""

    def test_non_string_slot_ignored(self) -> None:
        stored = LocalizedValue({"es": "Inicio", "en": 42, "visible": False})
        assert resolve("en", stored, "Home") == "Inicio"


class TestResolveSlot:
    """Per-language leaves never borrow the canonical language."""

    def test_missing_slot_uses_its_own_default(self) -> None:
        stored = LocalizedValue({"es": "Inicio"})
        assert resolve_slot("en", stored, "Home") == "Home"
        assert resolve_slot("es", stored, "Inicio!") == "Inicio"

    def test_scalar_applies_to_every_slot(self) -> None:
        assert resolve_slot("en", ScalarValue("https://x.test"), "d") == "https://x.test"
        assert resolve_slot("es", ScalarValue(""), "d") == ""


class TestLocalizedValue:
    def test_with_text_keeps_other_keys(self) -> None:
        value = LocalizedValue({"es": "Inicio", "en": "Home", "visible": False})
        updated = value.with_text("es", "Bienvenida")
        assert updated.values == {"es": "Bienvenida", "en": "Home", "visible": False}
        assert value.values["es"] == "Inicio"

    def test_merged_with_overlays(self) -> None:
        value = LocalizedValue({"es": "Inicio", "en": "Home"})
        assert value.merged_with({"en": "Start"}).values == {"es": "Inicio", "en": "Start"}

    def test_values_are_copied_on_construction(self) -> None:
        raw = {"es": "Inicio"}
        value = LocalizedValue(raw)
        raw["es"] = "changed"
        assert value.text("es") == "Inicio"


class TestAsLocalized:
    def test_none_is_empty_map(self) -> None:
        assert as_localized(None).values == {}

    def test_scalar_is_upgraded_to_every_language(self) -> None:
        upgraded = as_localized(ScalarValue("Hola"), ("es", "en"))
        assert upgraded.values == {"es": "Hola", "en": "Hola"}

    def test_map_is_returned_unchanged(self) -> None:
        value = LocalizedValue({"es": "Hola"})
        assert as_localized(value, ("es", "en")) is value
