"""Health check endpoint. No dependencies; used for liveness probes."""

from fastapi import APIRouter

from cms.infrastructure.firebase import get_firestore_client
from cms.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return ok; content_store reports whether Firestore is configured."""
    available = get_firestore_client() is not None
    return HealthResponse(content_store="available" if available else "unavailable")
