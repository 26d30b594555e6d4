"""Application ports: repository and collaborator protocols."""

from cms.application.interfaces.repositories import (
    IContentStore,
    ISettingsDocumentRepository,
    IThemeRepository,
)
from cms.application.interfaces.services import ITranslationService

__all__ = [
    "IContentStore",
    "ISettingsDocumentRepository",
    "IThemeRepository",
    "ITranslationService",
]
