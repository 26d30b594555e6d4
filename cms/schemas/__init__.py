"""Pydantic request/response schemas for the API."""

from cms.schemas.common import FieldError, OperationResultResponse
from cms.schemas.content import (
    ContentEntryResponse,
    InlineSaveRequest,
    InlineSaveResponse,
    RawContentResponse,
    RawSaveRequest,
    ResolvedContentResponse,
)
from cms.schemas.environment import (
    EnvironmentUpdateRequest,
    SetActiveEnvironmentRequest,
)
from cms.schemas.health import HealthResponse
from cms.schemas.me import EditableFlagResponse
from cms.schemas.theme import ThemeWriteRequest

__all__ = [
    "ContentEntryResponse",
    "EditableFlagResponse",
    "EnvironmentUpdateRequest",
    "FieldError",
    "HealthResponse",
    "InlineSaveRequest",
    "InlineSaveResponse",
    "OperationResultResponse",
    "RawContentResponse",
    "RawSaveRequest",
    "ResolvedContentResponse",
    "SetActiveEnvironmentRequest",
    "ThemeWriteRequest",
]
