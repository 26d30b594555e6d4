"""Service dependencies (composition root).

Builds repositories and application services from the process-wide
Firestore client, the Redis cache on app.state and settings. Routes
depend only on these providers, never on infrastructure directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from cms.api.v1.dependencies.auth import get_is_admin
from cms.application.interfaces.repositories import IContentStore
from cms.application.interfaces.services import ITranslationService
from cms.application.services import (
    ContentAdminService,
    EditableContext,
    EnvironmentConfigManager,
    SettingsAggregator,
    ThemeRegistry,
)
from cms.core.config import Settings, get_settings
from cms.infrastructure.external.translation import GeminiTranslationService
from cms.infrastructure.firebase import get_firestore_client
from cms.infrastructure.firebase.repositories import (
    FirestoreContentStore,
    FirestoreSettingsDocumentRepository,
    FirestoreThemeRepository,
)


def get_app_settings() -> Settings:
    return get_settings()


def get_content_store(
    request: Request,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> IContentStore:
    """Firestore content store with the Redis cache when one is connected."""
    cache = getattr(request.app.state, "cache", None)
    return FirestoreContentStore(
        get_firestore_client(), cache=cache, cache_ttl=settings.cache_ttl_content
    )


def get_translator(
    request: Request,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> ITranslationService:
    """Gemini translator sharing the app's outbound HTTP client."""
    http_client = getattr(request.app.state, "http_client", None)
    return GeminiTranslationService(settings, http_client=http_client)


def get_editable_context(
    store: Annotated[IContentStore, Depends(get_content_store)],
    is_admin: Annotated[bool, Depends(get_is_admin)],
) -> EditableContext:
    """A fresh editable context per request (one request = one page render)."""
    return EditableContext(store, is_admin=is_admin)


def get_settings_aggregator(
    store: Annotated[IContentStore, Depends(get_content_store)],
) -> SettingsAggregator:
    return SettingsAggregator(store)


def get_environment_manager(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> EnvironmentConfigManager:
    return EnvironmentConfigManager(
        FirestoreSettingsDocumentRepository(get_firestore_client()), settings
    )


def get_theme_registry() -> ThemeRegistry:
    return ThemeRegistry(FirestoreThemeRepository(get_firestore_client()))


def get_content_admin_service(
    store: Annotated[IContentStore, Depends(get_content_store)],
) -> ContentAdminService:
    return ContentAdminService(store)
