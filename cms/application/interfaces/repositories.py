"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference domain value objects or application DTOs only; no
infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from cms.application.dtos.content import ContentEntry
    from cms.application.dtos.theme import PredefinedTheme
    from cms.domain.value_objects.content import ContentValue


class IContentStore(Protocol):
    """Key -> ContentValue persistence. Reads fail soft; writes overwrite."""

    async def get(self, content_id: str) -> ContentValue | None:
        """Return the stored value, or None when absent or on any lookup error."""

    async def put(self, content_id: str, value: ContentValue) -> None:
        """Overwrite the whole value for content_id. Raises ContentStoreException."""

    async def delete(self, content_id: str) -> None:
        """Remove content_id. Idempotent. Raises ContentStoreException."""

    async def list_all(self) -> list[ContentEntry]:
        """Return every stored entry. Raises ContentStoreException."""


class ISettingsDocumentRepository(Protocol):
    """Single structured documents in the settings collection."""

    async def get_document(self, document_id: str) -> dict[str, Any] | None:
        """Return the document data, or None when absent or unreadable."""

    async def merge_document(self, document_id: str, data: dict[str, Any]) -> None:
        """Write only the leaf fields in data; keep every other stored field."""


class IThemeRepository(Protocol):
    """Wholesale CRUD over saved theme documents."""

    async def list_themes(self) -> list[PredefinedTheme]:
        """Return every saved theme sorted by name."""

    async def get_theme(self, theme_id: str) -> PredefinedTheme | None:
        """Return one theme or None."""

    async def save_theme(self, theme: PredefinedTheme) -> None:
        """Create or replace the theme document with theme.id."""

    async def delete_theme(self, theme_id: str) -> None:
        """Delete the theme document. Idempotent."""
