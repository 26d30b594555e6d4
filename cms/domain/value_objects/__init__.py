"""Domain value objects and shared value types."""

from cms.domain.value_objects.content import (
    ContentValue,
    LocalizedValue,
    ScalarValue,
    as_localized,
    content_value_from_raw,
)

__all__ = [
    "ContentValue",
    "LocalizedValue",
    "ScalarValue",
    "as_localized",
    "content_value_from_raw",
]
