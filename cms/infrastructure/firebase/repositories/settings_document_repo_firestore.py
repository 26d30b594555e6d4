"""Firestore-backed structured settings documents (implements ISettingsDocumentRepository)."""

from __future__ import annotations

import logging
from typing import Any

from cms.domain.exceptions import ContentStoreException
from cms.infrastructure.firebase._rest_client import FIRESTORE_ERRORS, FirestoreRESTClient
from cms.infrastructure.firebase.collections import COLLECTION_SETTINGS

logger = logging.getLogger(__name__)


class FirestoreSettingsDocumentRepository:
    """Reads and merge-writes whole documents of the settings collection."""

    def __init__(self, client: FirestoreRESTClient | None) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_SETTINGS) if client else None

    async def get_document(self, document_id: str) -> dict[str, Any] | None:
        """Return the document data, or None when absent or unreadable."""
        if self._coll is None:
            return None
        try:
            doc = await self._coll.document(document_id).get()
        except Exception:
            logger.warning("Settings read failed for %s", document_id, exc_info=True)
            return None
        return doc.to_dict() if doc else None

    async def merge_document(self, document_id: str, data: dict[str, Any]) -> None:
        """Write the leaf fields of data, keeping fields not mentioned."""
        if self._coll is None:
            raise ContentStoreException("write", document_id, "content store not configured")
        try:
            await self._coll.document(document_id).set(data, merge=True)
        except FIRESTORE_ERRORS as e:
            raise ContentStoreException("write", document_id, str(e)) from e
