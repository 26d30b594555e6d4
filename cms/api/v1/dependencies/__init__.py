"""FastAPI dependencies for API v1 (admin flag and service providers)."""

from cms.api.v1.dependencies.auth import get_is_admin, require_admin
from cms.api.v1.dependencies.services import (
    get_app_settings,
    get_content_admin_service,
    get_content_store,
    get_editable_context,
    get_environment_manager,
    get_settings_aggregator,
    get_theme_registry,
    get_translator,
)

__all__ = [
    "get_app_settings",
    "get_content_admin_service",
    "get_content_store",
    "get_editable_context",
    "get_environment_manager",
    "get_is_admin",
    "get_settings_aggregator",
    "get_theme_registry",
    "get_translator",
    "require_admin",
]
