"""API v1: routers under /api/v1."""

from cms.api.v1.router import api_router

__all__ = ["api_router"]
