"""Flatten pydantic validation errors into field-level messages."""

from typing import Any

from pydantic import ValidationError


def field_errors(exc: ValidationError) -> list[dict[str, str]]:
    """Return [{"field": "navLinks.home.es", "message": ...}, ...] for exc."""
    out: list[dict[str, str]] = []
    for err in exc.errors():
        loc: tuple[Any, ...] = err.get("loc", ())
        out.append(
            {
                "field": ".".join(str(part) for part in loc) or "__root__",
                "message": err.get("msg", "invalid value"),
            }
        )
    return out
