"""Service interfaces (ports) for the application layer.

Protocols define contracts for external collaborators (DIP).
"""

from __future__ import annotations

from typing import Protocol


class ITranslationService(Protocol):
    """Machine translation collaborator. Best effort; may raise."""

    async def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        """Return text translated from source_lang to target_lang.

        Raises TranslationException (or any transport error) on failure.
        """
