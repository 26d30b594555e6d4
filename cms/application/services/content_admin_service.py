"""Administrative content operations: listing, search, raw save, delete."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from cms.application.dtos.content import ContentEntry
from cms.application.interfaces.repositories import IContentStore
from cms.core.constants import SUPPORTED_LANGUAGES
from cms.domain.exceptions import ValidationException
from cms.domain.value_objects.content import (
    LocalizedValue,
    ScalarValue,
    content_value_from_raw,
)

logger = logging.getLogger(__name__)


def _matches(entry: ContentEntry, needle: str) -> bool:
    if needle in entry.id.casefold():
        return True
    if isinstance(entry.value, ScalarValue):
        return needle in entry.value.text.casefold()
    return any(
        isinstance(v, str) and needle in v.casefold() for v in entry.value.values.values()
    )


def normalize_raw_value(raw: Any) -> LocalizedValue:
    """Turn an admin-submitted value into a language map.

    A bare string is copied into every supported language; a map must
    hold string language slots and may carry extra non-language keys.

    Raises:
        ValidationException: If raw is neither a string nor a map, or a
            language slot is not a string.
    """
    value = content_value_from_raw(raw)
    if value is None:
        raise ValidationException("Content value must be a string or a language map", "value")
    if isinstance(value, ScalarValue):
        return value.upgrade(SUPPORTED_LANGUAGES)
    errors = [
        {"field": f"value.{lang}", "message": "must be a string"}
        for lang in SUPPORTED_LANGUAGES
        if lang in value.values and not isinstance(value.values[lang], str)
    ]
    if errors:
        raise ValidationException("Invalid language map", errors=errors)
    return value


class ContentAdminService:
    """Operations behind the admin content page."""

    def __init__(self, store: IContentStore) -> None:
        self._store = store

    async def list_entries(self, search: str | None = None) -> list[ContentEntry]:
        """Return all entries sorted by id, optionally filtered by a substring."""
        entries = await self._store.list_all()
        needle = (search or "").strip().casefold()
        if needle:
            entries = [e for e in entries if _matches(e, needle)]
        return entries

    async def save_raw(self, content_id: str, raw: str | Mapping[str, Any]) -> LocalizedValue:
        """Overwrite content_id with raw, upgraded to a language map."""
        value = normalize_raw_value(raw)
        await self._store.put(content_id, value)
        logger.info("Content %s saved from admin page", content_id)
        return value

    async def delete(self, content_id: str) -> None:
        await self._store.delete(content_id)
        logger.info("Content %s deleted", content_id)
