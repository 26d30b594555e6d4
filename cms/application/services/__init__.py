"""Application services: inline editing, settings, environments, themes, admin content."""

from cms.application.services.content_admin_service import ContentAdminService
from cms.application.services.editable_context import (
    EditableContext,
    EditableContextCache,
)
from cms.application.services.editable_field import (
    EditableFieldController,
    Notification,
)
from cms.application.services.environment_manager import (
    EnvironmentConfigManager,
    export_profile_as_text,
)
from cms.application.services.settings_aggregator import SettingsAggregator
from cms.application.services.theme_registry import (
    RuntimeStyleBlock,
    ThemeRegistry,
    render_theme_css,
)

__all__ = [
    "ContentAdminService",
    "EditableContext",
    "EditableContextCache",
    "EditableFieldController",
    "EnvironmentConfigManager",
    "Notification",
    "RuntimeStyleBlock",
    "SettingsAggregator",
    "ThemeRegistry",
    "export_profile_as_text",
    "render_theme_css",
]
