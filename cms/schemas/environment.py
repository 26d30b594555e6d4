"""Environment API schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SetActiveEnvironmentRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    active_environment: str = Field(..., min_length=1, max_length=32)


class EnvironmentUpdateRequest(BaseModel):
    """Profiles to merge into the environment document, plus an optional selector.

    Profile bodies are validated by the environment manager so that missing
    credentials come back as field-level messages.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    profiles: dict[str, dict[str, Any]] = Field(default_factory=dict)
    active_environment: str | None = None
