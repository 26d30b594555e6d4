"""Content API schemas."""

from typing import Any, Literal

from pydantic import BaseModel, Field

from cms.domain.value_objects.content import ContentValue, ScalarValue

RawValue = str | dict[str, Any]


def raw_or_none(value: ContentValue | None) -> RawValue | None:
    return value.to_raw() if value is not None else None


class ResolvedContentResponse(BaseModel):
    """Display text for one key in one language, plus the stored value."""

    id: str
    lang: str
    text: str
    value: RawValue | None = None


class RawContentResponse(BaseModel):
    id: str
    value: RawValue


class ContentEntryResponse(BaseModel):
    """One row of the admin content listing."""

    id: str
    value: RawValue
    legacy: bool = Field(
        default=False, description="True for bare-string values written before language maps"
    )

    @classmethod
    def from_value(cls, content_id: str, value: ContentValue) -> "ContentEntryResponse":
        return cls(id=content_id, value=value.to_raw(), legacy=isinstance(value, ScalarValue))


class InlineSaveRequest(BaseModel):
    """Inline edit: the text typed by the admin and the UI language it was typed in."""

    text: str = Field(..., min_length=1, max_length=10_000)
    lang: Literal["es", "en"] = "es"


class InlineSaveResponse(BaseModel):
    id: str
    lang: str
    value: dict[str, Any]
    display: str
    translated: bool


class RawSaveRequest(BaseModel):
    """Direct save from the admin content page (string or language map)."""

    value: RawValue
