"""Application DTOs: content entries, results, and validated aggregate shapes."""

from cms.application.dtos.content import ContentEntry, OperationResult, SaveOutcome
from cms.application.dtos.environment import (
    EnvironmentProfile,
    EnvironmentProfiles,
    FirebaseConfig,
)
from cms.application.dtos.settings import (
    BilingualText,
    ComponentButtons,
    HomeButtons,
    NavLink,
    NavLinks,
    SystemSettings,
)
from cms.application.dtos.theme import ColorTokenSet, PredefinedTheme, ThemeColors

__all__ = [
    "BilingualText",
    "ColorTokenSet",
    "ComponentButtons",
    "ContentEntry",
    "EnvironmentProfile",
    "EnvironmentProfiles",
    "FirebaseConfig",
    "HomeButtons",
    "NavLink",
    "NavLinks",
    "OperationResult",
    "PredefinedTheme",
    "SaveOutcome",
    "SystemSettings",
    "ThemeColors",
]
