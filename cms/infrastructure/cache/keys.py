"""Cache key builders. Single place for key format.

Key components must not contain CACHE_KEY_SEP to avoid ambiguous or
colliding keys.
"""

from cms.core.constants import CACHE_KEY_SEP, CACHE_PREFIX_CONTENT


def _validate_key_component(value: str, name: str) -> None:
    """Raise ValueError if value contains the cache key separator."""
    if CACHE_KEY_SEP in value:
        raise ValueError(
            f"Cache key component {name!r} must not contain separator {CACHE_KEY_SEP!r}"
        )


def content_key(content_id: str) -> str:
    """Cache key for one content entry by id."""
    _validate_key_component(content_id, "content_id")
    return f"{CACHE_PREFIX_CONTENT}{CACHE_KEY_SEP}{content_id}"
