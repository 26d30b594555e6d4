"""Firestore-backed theme repository (implements IThemeRepository)."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from cms.application.dtos.theme import PredefinedTheme
from cms.domain.exceptions import ContentStoreException
from cms.infrastructure.firebase._rest_client import FIRESTORE_ERRORS, FirestoreRESTClient
from cms.infrastructure.firebase.collections import COLLECTION_THEMES

logger = logging.getLogger(__name__)


class FirestoreThemeRepository:
    """Saved themes, one document per theme: {name, colors: {light, dark}}."""

    def __init__(self, client: FirestoreRESTClient | None) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_THEMES) if client else None

    def _to_theme(self, doc_id: str, data: dict) -> PredefinedTheme | None:
        try:
            return PredefinedTheme.model_validate({**data, "id": doc_id})
        except ValidationError:
            logger.warning("Skipping malformed theme document %s", doc_id)
            return None

    def _require_coll(self, operation: str, theme_id: str):
        if self._coll is None:
            raise ContentStoreException(operation, theme_id, "content store not configured")
        return self._coll

    async def list_themes(self) -> list[PredefinedTheme]:
        """Return every readable theme, sorted by name."""
        coll = self._require_coll("list", COLLECTION_THEMES)
        themes: list[PredefinedTheme] = []
        try:
            async for snapshot in coll.stream():
                theme = self._to_theme(snapshot.id, snapshot.to_dict())
                if theme is not None:
                    themes.append(theme)
        except FIRESTORE_ERRORS as e:
            raise ContentStoreException("list", COLLECTION_THEMES, str(e)) from e
        themes.sort(key=lambda t: t.name.casefold())
        return themes

    async def get_theme(self, theme_id: str) -> PredefinedTheme | None:
        """Return theme by ID."""
        if self._coll is None:
            return None
        try:
            doc = await self._coll.document(theme_id).get()
        except FIRESTORE_ERRORS:
            logger.warning("Theme read failed for %s", theme_id, exc_info=True)
            return None
        if not doc:
            return None
        return self._to_theme(doc.id, doc.to_dict())

    async def save_theme(self, theme: PredefinedTheme) -> None:
        """Create or replace the whole theme document."""
        coll = self._require_coll("write", theme.id)
        data = theme.model_dump(by_alias=True, exclude={"id"})
        try:
            await coll.document(theme.id).set(data)
        except FIRESTORE_ERRORS as e:
            raise ContentStoreException("write", theme.id, str(e)) from e

    async def delete_theme(self, theme_id: str) -> None:
        """Delete the theme document; missing documents are ignored."""
        coll = self._require_coll("delete", theme_id)
        try:
            await coll.document(theme_id).delete()
        except FIRESTORE_ERRORS as e:
            raise ContentStoreException("delete", theme_id, str(e)) from e
