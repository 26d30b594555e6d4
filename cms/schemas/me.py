"""Caller capability schemas."""

from pydantic import BaseModel


class EditableFlagResponse(BaseModel):
    """Whether the caller may edit content inline."""

    is_admin: bool
