"""Domain layer: content value objects, fallback resolution, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from cms.domain.enums import EnvironmentName, FieldState, LanguageCode
from cms.domain.exceptions import (
    AuthorizationException,
    CmsException,
    ContentStoreException,
    InvalidStateTransitionException,
    ResourceNotFoundException,
    TranslationException,
    ValidationException,
)
from cms.domain.fallback import resolve, resolve_slot
from cms.domain.value_objects import (
    ContentValue,
    LocalizedValue,
    ScalarValue,
    content_value_from_raw,
)

__all__ = [
    # Enums
    "EnvironmentName",
    "FieldState",
    "LanguageCode",
    # Exceptions
    "AuthorizationException",
    "CmsException",
    "ContentStoreException",
    "InvalidStateTransitionException",
    "ResourceNotFoundException",
    "TranslationException",
    "ValidationException",
    # Fallback
    "resolve",
    "resolve_slot",
    # Value objects
    "ContentValue",
    "LocalizedValue",
    "ScalarValue",
    "content_value_from_raw",
]
