"""Theme palettes: light/dark sets of HSL color tokens."""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# "210 40% 96.1%": hue, saturation%, lightness%
_HSL_RE = re.compile(r"^\d{1,3}(\.\d+)? \d{1,3}(\.\d+)?% \d{1,3}(\.\d+)?%$")


class ColorTokenSet(BaseModel):
    """The 19 named color tokens of one mode, each an HSL triplet string."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    background: str
    foreground: str
    card: str
    card_foreground: str
    popover: str
    popover_foreground: str
    primary: str
    primary_foreground: str
    secondary: str
    secondary_foreground: str
    muted: str
    muted_foreground: str
    accent: str
    accent_foreground: str
    destructive: str
    destructive_foreground: str
    border: str
    input: str
    ring: str

    @field_validator("*")
    @classmethod
    def validate_hsl(cls, v: str) -> str:
        v = " ".join(v.split())
        if not _HSL_RE.match(v):
            raise ValueError("must be an HSL triplet like '210 40% 96.1%'")
        return v


class ThemeColors(BaseModel):
    model_config = ConfigDict(extra="forbid")

    light: ColorTokenSet
    dark: ColorTokenSet


class PredefinedTheme(BaseModel):
    """A named, saved palette."""

    model_config = ConfigDict(extra="forbid")

    id: str
    name: str = Field(..., min_length=1, max_length=80)
    colors: ThemeColors
