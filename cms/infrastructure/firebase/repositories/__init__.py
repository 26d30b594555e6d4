"""Firestore-backed repository implementations."""

from cms.infrastructure.firebase.repositories.content_store_firestore import (
    FirestoreContentStore,
)
from cms.infrastructure.firebase.repositories.settings_document_repo_firestore import (
    FirestoreSettingsDocumentRepository,
)
from cms.infrastructure.firebase.repositories.theme_repo_firestore import (
    FirestoreThemeRepository,
)

__all__ = [
    "FirestoreContentStore",
    "FirestoreSettingsDocumentRepository",
    "FirestoreThemeRepository",
]
