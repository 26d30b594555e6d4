"""Domain exceptions for the content service.

Defines domain-level exceptions that represent rule violations or failed
collaborator calls. These exceptions are independent of infrastructure
concerns. Presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class CmsException(Exception):
    """Base exception for all content service errors.

    Presentation layer maps these to HTTP responses using message,
    error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, content_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return JSON-serializable error body."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(CmsException):
    """Raised when input validation fails.

    Carries field-level messages in details["errors"] as a list of
    {"field": ..., "message": ...} dicts.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        errors: list[dict[str, str]] | None = None,
    ) -> None:
        """Initialize with message and optional field or field errors.

        Args:
            message: Description of the validation failure.
            field: Optional single field that failed validation.
            errors: Optional list of field-level errors.
        """
        details: dict[str, Any] = {}
        if field:
            details["field"] = field
        if errors:
            details["errors"] = errors
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthorizationException(CmsException):
    """Raised when a caller without edit rights attempts an admin operation."""

    def __init__(self, action: str | None = None) -> None:
        message = f"Permission denied: {action}" if action else "Permission denied"
        details = {"action": action} if action else {}
        super().__init__(message, "PERMISSION_DENIED", details)


class ResourceNotFoundException(CmsException):
    """Raised when a content entry, theme or profile does not exist."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ContentStoreException(CmsException):
    """Raised when a document write (or an explicit read) fails."""

    def __init__(self, operation: str, document_id: str, reason: str) -> None:
        super().__init__(
            f"Content store {operation} failed for {document_id}: {reason}",
            "CONTENT_STORE_ERROR",
            {"operation": operation, "document_id": document_id, "reason": reason},
        )


class TranslationException(CmsException):
    """Raised when the translation service cannot produce a translation."""

    def __init__(self, source_lang: str, target_lang: str, reason: str) -> None:
        super().__init__(
            f"Translation {source_lang}->{target_lang} failed: {reason}",
            "TRANSLATION_ERROR",
            {"source_lang": source_lang, "target_lang": target_lang, "reason": reason},
        )


class InvalidStateTransitionException(CmsException):
    """Raised when an editable field is asked to move out of order."""

    def __init__(self, current: str, requested: str) -> None:
        super().__init__(
            f"Cannot {requested} while {current}",
            "INVALID_STATE_TRANSITION",
            {"current_state": current, "requested": requested},
        )
