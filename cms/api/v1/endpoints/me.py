"""Caller capabilities."""

from typing import Annotated

from fastapi import APIRouter, Depends

from cms.api.v1.dependencies import get_is_admin
from cms.schemas.me import EditableFlagResponse

router = APIRouter()


@router.get("/editable", response_model=EditableFlagResponse)
async def get_editable_flag(
    is_admin: Annotated[bool, Depends(get_is_admin)],
) -> EditableFlagResponse:
    """Whether inline editing controls should be shown to this caller."""
    return EditableFlagResponse(is_admin=is_admin)
