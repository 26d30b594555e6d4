"""Application layer: ports, DTOs, and services.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (content store, settings
documents, themes, translation).
"""

from cms.application.interfaces import (
    IContentStore,
    ISettingsDocumentRepository,
    IThemeRepository,
    ITranslationService,
)
from cms.application.services import (
    ContentAdminService,
    EditableContext,
    EditableFieldController,
    EnvironmentConfigManager,
    SettingsAggregator,
    ThemeRegistry,
)

__all__ = [
    "ContentAdminService",
    "EditableContext",
    "EditableFieldController",
    "EnvironmentConfigManager",
    "IContentStore",
    "ISettingsDocumentRepository",
    "IThemeRepository",
    "ITranslationService",
    "SettingsAggregator",
    "ThemeRegistry",
]
