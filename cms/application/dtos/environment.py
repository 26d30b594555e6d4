"""Environment profiles document: named sets of external-service credentials."""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from cms.domain.enums import EnvironmentName

_PROFILE_NAME_PATTERN = r"^[a-z][a-z0-9_-]{0,31}$"
_PROFILE_NAME_RE = re.compile(_PROFILE_NAME_PATTERN)


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class FirebaseConfig(_CamelModel):
    """Public Firebase web config. Completeness is checked on write."""

    api_key: str = ""
    auth_domain: str = ""
    project_id: str = ""
    storage_bucket: str = ""
    messaging_sender_id: str = ""
    app_id: str = ""


class EnvironmentProfile(_CamelModel):
    firebase_config: FirebaseConfig = Field(default_factory=FirebaseConfig)
    google_api_key: str | None = None
    resend_api_key: str | None = None


class EnvironmentProfiles(_CamelModel):
    """The whole environment document.

    profiles is keyed by profile name ("production", "backup", or any
    other lowercase slug).
    """

    active_environment: str = Field(
        default=EnvironmentName.PRODUCTION.value, pattern=_PROFILE_NAME_PATTERN
    )
    profiles: dict[str, EnvironmentProfile] = Field(default_factory=dict)

    @field_validator("profiles")
    @classmethod
    def validate_profile_names(
        cls, v: dict[str, EnvironmentProfile]
    ) -> dict[str, EnvironmentProfile]:
        for name in v:
            if not _PROFILE_NAME_RE.match(name):
                raise ValueError(f"invalid profile name {name!r}")
        return v
