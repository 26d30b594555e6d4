"""Machine translation backends."""

from cms.infrastructure.external.translation.gemini_client import (
    GeminiTranslationService,
)

__all__ = ["GeminiTranslationService"]
