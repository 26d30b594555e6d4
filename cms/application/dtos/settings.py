"""System settings aggregate: a typed view over many content keys.

Field names are snake_case in Python and camelCase on the wire (the shape
the web front end already reads).
"""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

_URL_RE = re.compile(r"^(https?://\S+|/\S*)$")
_PHONE_RE = re.compile(r"^\d{8,15}$")


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class BilingualText(_CamelModel):
    """A caption in both languages."""

    es: str = Field(..., min_length=1)
    en: str = Field(..., min_length=1)


class NavLink(BilingualText):
    """Navigation label with its visibility flag."""

    visible: bool = True


class NavLinks(_CamelModel):
    home: NavLink
    medicine: NavLink
    guides: NavLink
    testimonials: NavLink
    ceremonies: NavLink
    journey: NavLink
    preparation: NavLink


class HomeButtons(_CamelModel):
    medicine: BilingualText
    guides: BilingualText
    preparation: BilingualText


class ComponentButtons(_CamelModel):
    add_ceremony: BilingualText
    button_view_details: BilingualText
    whatsapp_community_button: BilingualText


class SystemSettings(_CamelModel):
    """Every administrator-editable site setting.

    Each leaf is stored under its own content key (see
    cms.application.services.settings_aggregator for the key table).
    """

    logo_url: str
    whatsapp_community_link: str
    instagram_url: str
    facebook_url: str
    tiktok_url: str
    whatsapp_number: str
    nav_links: NavLinks
    home_buttons: HomeButtons
    component_buttons: ComponentButtons
    og_title: BilingualText
    og_description: BilingualText

    @field_validator(
        "logo_url",
        "whatsapp_community_link",
        "instagram_url",
        "facebook_url",
        "tiktok_url",
    )
    @classmethod
    def validate_url(cls, v: str) -> str:
        v = v.strip()
        if not _URL_RE.match(v):
            raise ValueError("must be an http(s) URL or a site-relative path")
        return v

    @field_validator("whatsapp_number")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        digits = re.sub(r"[\s+\-()]", "", v)
        if not _PHONE_RE.match(digits):
            raise ValueError("must be 8-15 digits including country code")
        return digits
