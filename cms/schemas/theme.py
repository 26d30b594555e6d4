"""Theme API schemas."""

from pydantic import BaseModel, ConfigDict, Field

from cms.application.dtos.theme import ThemeColors


class ThemeWriteRequest(BaseModel):
    """Body for creating a theme or replacing one wholesale."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, max_length=80)
    colors: ThemeColors
