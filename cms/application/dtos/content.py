"""DTOs for content entries and inline-edit outcomes."""

from dataclasses import dataclass, field

from cms.domain.value_objects.content import ContentValue, LocalizedValue


@dataclass(frozen=True)
class ContentEntry:
    """One stored key and its value (admin content listing)."""

    id: str
    value: ContentValue


@dataclass(frozen=True)
class SaveOutcome:
    """Result of an inline-edit save.

    translated is False when the sibling language could not be produced;
    persisted is False when the store write failed (the field shows the
    pre-edit value again).
    """

    content_id: str
    lang: str
    value: LocalizedValue
    display: str
    translated: bool
    persisted: bool


@dataclass(frozen=True)
class OperationResult:
    """{success, message} result of an administrative batch write."""

    success: bool
    message: str
    errors: list[dict[str, str]] = field(default_factory=list)
