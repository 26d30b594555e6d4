"""Shared utilities: id generators, validation error formatting."""

from cms.shared.utils.generators import generate_theme_id
from cms.shared.utils.validation import field_errors

__all__ = [
    "field_errors",
    "generate_theme_id",
]
