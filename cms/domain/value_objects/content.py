"""Content value objects: the stored shape of one editable key.

A content entry holds either a legacy bare string (ScalarValue) or a
language map (LocalizedValue). Language maps may also carry non-language
keys (e.g. the ``visible`` flag of navigation links); those are preserved
by every merge.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class ScalarValue:
    """Legacy single-string value, shown as-is in every language."""

    text: str

    def to_raw(self) -> str:
        return self.text

    def upgrade(self, languages: tuple[str, ...]) -> LocalizedValue:
        """Return a language map with this text in every given language."""
        return LocalizedValue({lang: self.text for lang in languages})


@dataclass(frozen=True)
class LocalizedValue:
    """Language map {lang: text}, plus any extra non-language keys."""

    values: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", dict(self.values))

    def text(self, lang: str) -> str | None:
        """Return the non-empty text stored for lang, else None."""
        value = self.values.get(lang)
        if isinstance(value, str) and value:
            return value
        return None

    def with_text(self, lang: str, text: str) -> LocalizedValue:
        """Return a copy with lang set to text; every other key is kept."""
        merged = dict(self.values)
        merged[lang] = text
        return LocalizedValue(merged)

    def merged_with(self, other: Mapping[str, Any]) -> LocalizedValue:
        """Return a copy with other's keys laid over this map."""
        merged = dict(self.values)
        merged.update(other)
        return LocalizedValue(merged)

    def to_raw(self) -> dict[str, Any]:
        return dict(self.values)


ContentValue = Union[ScalarValue, LocalizedValue]


def content_value_from_raw(raw: Any) -> ContentValue | None:
    """Build a ContentValue from a stored ``value`` field.

    Returns None for absent (None) or unrecognized shapes so callers fall
    back to their defaults.
    """
    if raw is None:
        return None
    if isinstance(raw, str):
        return ScalarValue(raw)
    if isinstance(raw, Mapping):
        return LocalizedValue(raw)
    return None


def as_localized(value: ContentValue | None, languages: tuple[str, ...] = ()) -> LocalizedValue:
    """Return value as a language map for editing.

    Absent values become an empty map. Legacy scalars are upgraded by
    copying the text into each of ``languages`` (none by default).
    """
    if value is None:
        return LocalizedValue()
    if isinstance(value, ScalarValue):
        return value.upgrade(languages)
    return value
