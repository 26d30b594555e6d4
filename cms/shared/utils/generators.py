"""ID generators for user-created documents."""

import uuid


def generate_theme_id() -> str:
    """Return a new random UUID4 string for a saved theme document."""
    return str(uuid.uuid4())
