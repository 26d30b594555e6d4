"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (Firestore client, Redis cache,
shared HTTP client, telemetry).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from cms.core.config import get_settings
from cms.infrastructure.firebase import close_firebase, init_firebase

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: shared HTTP client, Firestore client, Redis cache (if
    enabled), telemetry (if enabled). Shutdown runs in reverse.
    A missing Firestore configuration is not fatal: pages get defaults.
    """
    settings = get_settings()

    # ---- Startup ----
    # Shared HTTP client for the translation service (connection reuse).
    app.state.http_client = httpx.AsyncClient(
        timeout=settings.translation_timeout_seconds
    )

    if not init_firebase():
        logger.warning("Content store unavailable; serving compiled defaults")

    if settings.redis_enabled:
        from cms.infrastructure.cache.redis_cache import CacheService

        cache = CacheService()
        await cache.connect()
        app.state.cache = cache
    else:
        app.state.cache = None

    if settings.telemetry_enabled:
        from cms.shared.telemetry.telemetry import TelemetryConfig, set_telemetry

        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=True,
            environment=settings.telemetry_environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        set_telemetry(telemetry)
        telemetry.instrument_fastapi(app)
        logger.info("Telemetry initialized")

    yield

    # ---- Shutdown ----
    from cms.shared.telemetry.telemetry import get_telemetry, set_telemetry

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
        logger.info("Telemetry shutdown complete")

    if getattr(app.state, "cache", None) is not None:
        await app.state.cache.disconnect()
        app.state.cache = None

    await close_firebase()

    if getattr(app.state, "http_client", None) is not None:
        await app.state.http_client.aclose()
        app.state.http_client = None
        logger.info("Shared HTTP client closed")
