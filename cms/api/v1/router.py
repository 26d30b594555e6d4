"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from cms.api.v1.dependencies (no manual repo/service construction).
"""

from fastapi import APIRouter

from cms.api.v1.endpoints import content, environment, health, me, settings, themes

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(content.router, prefix="/content", tags=["content"])
api_router.include_router(settings.router, prefix="/settings", tags=["settings"])
api_router.include_router(
    environment.router, prefix="/environment", tags=["environment"]
)
api_router.include_router(themes.router, prefix="/themes", tags=["themes"])
api_router.include_router(me.router, prefix="/me", tags=["me"])
