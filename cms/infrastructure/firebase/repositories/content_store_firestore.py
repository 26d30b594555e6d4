"""Firestore-backed content store (implements IContentStore).

Each key lives in the ``content`` collection as ``{"value": <raw>}`` where
raw is a bare string (legacy) or a language map. Reads never raise: a
missing client, a transport error or an unrecognized shape all read as
absent, so pages render their compiled-in defaults.
"""

from __future__ import annotations

import logging
from typing import Any

from cms.application.dtos.content import ContentEntry
from cms.domain.exceptions import ContentStoreException
from cms.domain.value_objects.content import ContentValue, content_value_from_raw
from cms.infrastructure.cache.cache_protocol import CacheProtocol
from cms.infrastructure.cache.keys import content_key
from cms.infrastructure.firebase._rest_client import FIRESTORE_ERRORS, FirestoreRESTClient
from cms.infrastructure.firebase.collections import COLLECTION_CONTENT
from cms.shared.telemetry.tracing import add_span_event, traced

logger = logging.getLogger(__name__)

_VALUE_FIELD = "value"


def _cache_key(content_id: str) -> str | None:
    try:
        return content_key(content_id)
    except ValueError:
        return None


class FirestoreContentStore:
    """Content store using Firestore, with an optional Redis read-through cache."""

    def __init__(
        self,
        client: FirestoreRESTClient | None,
        cache: CacheProtocol | None = None,
        cache_ttl: int = 300,
    ) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_CONTENT) if client else None
        self._cache = cache
        self._cache_ttl = cache_ttl

    def _cache_usable(self) -> bool:
        return self._cache is not None and self._cache.is_available()

    @traced("content_store.get")
    async def get(self, content_id: str) -> ContentValue | None:
        """Return the stored value for content_id, or None (never raises)."""
        key = _cache_key(content_id)
        if key and self._cache_usable():
            cached = await self._cache.get(key)
            if cached is not None:
                add_span_event("cache_hit", {"content_id": content_id})
                return content_value_from_raw(cached)

        if self._coll is None:
            return None
        try:
            doc = await self._coll.document(content_id).get()
        except Exception:
            logger.warning("Content read failed for %s", content_id, exc_info=True)
            return None
        if not doc:
            return None

        raw = doc.to_dict().get(_VALUE_FIELD)
        value = content_value_from_raw(raw)
        if value is None:
            if raw is not None:
                logger.warning("Ignoring malformed content value for %s", content_id)
            return None
        if key and self._cache_usable():
            await self._cache.set(key, value.to_raw(), ttl=self._cache_ttl)
        return value

    @traced("content_store.put")
    async def put(self, content_id: str, value: ContentValue) -> None:
        """Overwrite the whole value of content_id."""
        if self._coll is None:
            raise ContentStoreException("write", content_id, "content store not configured")
        raw: Any = value.to_raw()
        try:
            await self._coll.document(content_id).set({_VALUE_FIELD: raw})
        except FIRESTORE_ERRORS as e:
            raise ContentStoreException("write", content_id, str(e)) from e

        key = _cache_key(content_id)
        if key and self._cache_usable():
            await self._cache.set(key, raw, ttl=self._cache_ttl)

    @traced("content_store.delete")
    async def delete(self, content_id: str) -> None:
        """Delete content_id. Missing documents are not an error."""
        if self._coll is None:
            raise ContentStoreException("delete", content_id, "content store not configured")
        try:
            await self._coll.document(content_id).delete()
        except FIRESTORE_ERRORS as e:
            raise ContentStoreException("delete", content_id, str(e)) from e

        key = _cache_key(content_id)
        if key and self._cache_usable():
            await self._cache.delete(key)

    @traced("content_store.list_all")
    async def list_all(self) -> list[ContentEntry]:
        """Return every entry with a recognizable value, sorted by id."""
        if self._coll is None:
            raise ContentStoreException("list", COLLECTION_CONTENT, "content store not configured")
        entries: list[ContentEntry] = []
        try:
            async for snapshot in self._coll.stream():
                value = content_value_from_raw(snapshot.to_dict().get(_VALUE_FIELD))
                if value is not None:
                    entries.append(ContentEntry(id=snapshot.id, value=value))
        except FIRESTORE_ERRORS as e:
            raise ContentStoreException("list", COLLECTION_CONTENT, str(e)) from e
        entries.sort(key=lambda e: e.id)
        return entries
