"""Fallback resolution of display strings.

The chain is: requested language -> canonical language (es) -> the
caller's compiled-in default. Legacy scalar values ignore the language
and are returned as stored, even when empty.
Empty language slots count as missing.
"""

from cms.core.constants import CANONICAL_LANGUAGE
from cms.domain.value_objects.content import ContentValue, LocalizedValue, ScalarValue


def resolve(requested_lang: str, stored: ContentValue | None, fallback: str) -> str:
    """Return the display string for a content key.

    Args:
        requested_lang: Language the page is rendered in (e.g. 'en').
        stored: Stored value, or None when the key is absent or unreadable.
        fallback: Compiled-in default supplied by the caller.

    Returns:
        stored[requested_lang], else stored['es'], else fallback for maps;
        the scalar text for legacy values; fallback when absent.
    """
    if stored is None:
        return fallback
    if isinstance(stored, ScalarValue):
        return stored.text
    if isinstance(stored, LocalizedValue):
        return (
            stored.text(requested_lang)
            or stored.text(CANONICAL_LANGUAGE)
            or fallback
        )
    raise TypeError(f"Unsupported content value: {type(stored).__name__}")


def resolve_slot(lang: str, stored: ContentValue | None, fallback: str) -> str:
    """Return exactly the lang slot of stored, else fallback.

    Used to fill one language leaf of a bilingual settings field, where
    borrowing the canonical language would make the other leaf's default
    unreachable. Legacy scalars still apply to every language.
    """
    if stored is None:
        return fallback
    if isinstance(stored, ScalarValue):
        return stored.text
    return stored.text(lang) or fallback
