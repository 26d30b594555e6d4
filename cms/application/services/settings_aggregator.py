"""System settings aggregate over individual content keys.

Every leaf of SystemSettings lives under its own content key; the table
below is the single mapping between the two, used for both read and
write. Defaults are the compiled-in values shown when a key is absent.
There is no transaction across keys: a write failing partway leaves the
earlier keys written.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError
from pydantic.alias_generators import to_snake

from cms.application.dtos.content import OperationResult
from cms.application.dtos.settings import SystemSettings
from cms.application.interfaces.repositories import IContentStore
from cms.core.constants import CANONICAL_LANGUAGE, SUPPORTED_LANGUAGES
from cms.domain.fallback import resolve, resolve_slot
from cms.domain.value_objects.content import ContentValue, LocalizedValue
from cms.shared.telemetry.tracing import traced
from cms.shared.utils.validation import field_errors

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScalarSetting:
    """A single-string setting (URL or phone number)."""

    attr: str
    key: str
    default: str


@dataclass(frozen=True)
class BilingualSetting:
    """A caption stored as {es, en}, optionally with a visibility flag."""

    path: tuple[str, ...]
    key: str
    es: str
    en: str
    has_visibility: bool = False

    def default(self, lang: str) -> str:
        return self.es if lang == "es" else self.en


DEFAULT_LOGO_URL = (
    "https://firebasestorage.googleapis.com/v0/b/el-arte-de-sanar-dev.appspot.com"
    "/o/images%2F1722035985834-logo.png?alt=media"
)

SCALAR_SETTINGS: tuple[ScalarSetting, ...] = (
    ScalarSetting("logo_url", "logoUrl", DEFAULT_LOGO_URL),
    ScalarSetting(
        "whatsapp_community_link",
        "whatsappCommunityLink",
        "https://chat.whatsapp.com/BC9bfrXVZdYL0kti2Ox1bQ",
    ),
    ScalarSetting("instagram_url", "instagramUrl", "https://www.instagram.com/elartedesanarcr"),
    ScalarSetting(
        "facebook_url",
        "facebookUrl",
        "https://www.facebook.com/profile.php?id=61574627625274",
    ),
    ScalarSetting("tiktok_url", "tiktokUrl", "https://www.tiktok.com/@elartedesanarcr"),
    ScalarSetting("whatsapp_number", "whatsappNumber", "50687992560"),
)

BILINGUAL_SETTINGS: tuple[BilingualSetting, ...] = (
    BilingualSetting(("nav_links", "home"), "navHome", "Inicio", "Home", True),
    BilingualSetting(("nav_links", "medicine"), "navMedicine", "Medicina", "Medicine", True),
    BilingualSetting(("nav_links", "guides"), "navGuides", "Guías", "Guides", True),
    BilingualSetting(
        ("nav_links", "testimonials"), "navTestimonials", "Testimonios", "Testimonials", True
    ),
    BilingualSetting(
        ("nav_links", "ceremonies"), "navCeremonies", "Ceremonias", "Ceremonies", True
    ),
    BilingualSetting(
        ("nav_links", "journey"), "navJourney", "Iniciar mi Viaje", "Start my Journey", True
    ),
    BilingualSetting(
        ("nav_links", "preparation"), "navPreparation", "Preparación", "Preparation", True
    ),
    BilingualSetting(
        ("home_buttons", "medicine"),
        "homeButtonMedicine",
        "Conocer la Medicina",
        "Know the Medicine",
    ),
    BilingualSetting(
        ("home_buttons", "guides"), "homeButtonGuides", "Conocer los Guías", "Meet the Guides"
    ),
    BilingualSetting(
        ("home_buttons", "preparation"),
        "homeButtonPreparation",
        "Iniciar Preparación",
        "Start Preparation",
    ),
    BilingualSetting(
        ("component_buttons", "add_ceremony"),
        "componentButtonAddCeremony",
        "Agregar Ceremonia",
        "Add Ceremony",
    ),
    BilingualSetting(
        ("component_buttons", "button_view_details"),
        "componentButtonViewDetails",
        "Ver Detalles",
        "View Details",
    ),
    BilingualSetting(
        ("component_buttons", "whatsapp_community_button"),
        "componentButtonWhatsappCommunityButton",
        "Unirse a la Comunidad",
        "Join the Community",
    ),
    BilingualSetting(("og_title",), "ogTitle", "El Arte de Sanar", "The Art of Healing"),
    BilingualSetting(
        ("og_description",),
        "ogDescription",
        "Un espacio de sanación profunda, cuidado y transformación con medicinas ancestrales.",
        "A space for deep healing, care and transformation with ancestral medicines.",
    ),
)


def _assign(data: dict[str, Any], path: tuple[str, ...], value: Any) -> None:
    node = data
    for part in path[:-1]:
        node = node.setdefault(part, {})
    node[path[-1]] = value


def _lookup(data: Mapping[str, Any], path: tuple[str, ...]) -> Any:
    node: Any = data
    for part in path:
        node = node[part]
    return node


def _visible(stored: ContentValue | None) -> bool:
    if isinstance(stored, LocalizedValue):
        flag = stored.values.get("visible")
        if isinstance(flag, bool):
            return flag
    return True


def _bilingual_leaf(setting: BilingualSetting, stored: ContentValue | None) -> dict[str, Any]:
    leaf: dict[str, Any] = {
        lang: resolve_slot(lang, stored, setting.default(lang)) for lang in SUPPORTED_LANGUAGES
    }
    if setting.has_visibility:
        leaf["visible"] = _visible(stored)
    return leaf


def default_settings_data() -> dict[str, Any]:
    """Return the compiled-in defaults in SystemSettings field-name shape."""
    data: dict[str, Any] = {}
    for scalar in SCALAR_SETTINGS:
        data[scalar.attr] = scalar.default
    for setting in BILINGUAL_SETTINGS:
        _assign(data, setting.path, _bilingual_leaf(setting, None))
    return data


def default_content_entries() -> dict[str, Any]:
    """Return {content key: raw stored value} for every default (seeding)."""
    entries: dict[str, Any] = {}
    for scalar in SCALAR_SETTINGS:
        entries[scalar.key] = {lang: scalar.default for lang in SUPPORTED_LANGUAGES}
    for setting in BILINGUAL_SETTINGS:
        entries[setting.key] = _bilingual_leaf(setting, None)
    return entries


def _setting_path_for(loc: tuple[Any, ...]) -> tuple[str, ...] | None:
    """Map a validation error location to the setting leaf it belongs to."""
    parts = tuple(to_snake(p) if isinstance(p, str) else p for p in loc)
    for scalar in SCALAR_SETTINGS:
        if parts[:1] == (scalar.attr,):
            return (scalar.attr,)
    for setting in BILINGUAL_SETTINGS:
        if parts[: len(setting.path)] == setting.path:
            return setting.path
    return None


class SettingsAggregator:
    """Compose and decompose SystemSettings over the content store."""

    def __init__(self, store: IContentStore) -> None:
        self._store = store

    @traced("settings.read")
    async def read(self) -> SystemSettings:
        """Assemble SystemSettings, filling every absent leaf with its default.

        A stored leaf that fails validation is replaced by its default so a
        bad entry never hides the rest of the settings.
        """
        data: dict[str, Any] = {}
        for scalar in SCALAR_SETTINGS:
            stored = await self._store.get(scalar.key)
            data[scalar.attr] = resolve(CANONICAL_LANGUAGE, stored, scalar.default)
        for setting in BILINGUAL_SETTINGS:
            stored = await self._store.get(setting.key)
            _assign(data, setting.path, _bilingual_leaf(setting, stored))

        try:
            return SystemSettings.model_validate(data)
        except ValidationError as e:
            defaults = default_settings_data()
            for err in e.errors():
                path = _setting_path_for(tuple(err.get("loc", ())))
                if path is None:
                    raise
                logger.warning("Stored setting %s is invalid; using default", ".".join(path))
                _assign(data, path, _lookup(defaults, path))
            return SystemSettings.model_validate(data)

    def decompose(self, settings: SystemSettings) -> list[tuple[str, LocalizedValue]]:
        """Return the (content key, value) writes for settings, in table order.

        Scalars are written as the same text in both languages.
        """
        data = settings.model_dump()
        writes: list[tuple[str, LocalizedValue]] = []
        for scalar in SCALAR_SETTINGS:
            text = data[scalar.attr]
            writes.append(
                (scalar.key, LocalizedValue({lang: text for lang in SUPPORTED_LANGUAGES}))
            )
        for setting in BILINGUAL_SETTINGS:
            leaf = _lookup(data, setting.path)
            value: dict[str, Any] = {lang: leaf[lang] for lang in SUPPORTED_LANGUAGES}
            if setting.has_visibility:
                value["visible"] = leaf["visible"]
            writes.append((setting.key, LocalizedValue(value)))
        return writes

    @traced("settings.write")
    async def write(self, settings: SystemSettings | Mapping[str, Any]) -> OperationResult:
        """Validate, then write one content key per leaf.

        Invalid input is rejected before any write. Errors while writing are
        reported in the result, never raised; keys written before the
        failure stay written.
        """
        if isinstance(settings, SystemSettings):
            validated = settings
        else:
            try:
                validated = SystemSettings.model_validate(settings)
            except ValidationError as e:
                errors = field_errors(e)
                logger.info("Rejected settings update with %d invalid field(s)", len(errors))
                return OperationResult(False, "Invalid settings.", errors)

        writes = self.decompose(validated)
        written = 0
        try:
            for key, value in writes:
                await self._store.put(key, value)
                written += 1
        except Exception as e:
            logger.exception(
                "Settings update failed after %d of %d keys", written, len(writes)
            )
            return OperationResult(False, f"Failed to update settings: {e}")

        logger.info("System settings updated (%d keys)", written)
        return OperationResult(True, "Settings updated successfully.")

    async def get_system_settings(self) -> SystemSettings:
        return await self.read()

    async def update_system_settings(
        self, settings: SystemSettings | Mapping[str, Any]
    ) -> OperationResult:
        return await self.write(settings)
