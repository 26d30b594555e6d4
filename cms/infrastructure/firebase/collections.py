"""Firestore collection names (schema-in-code).

Firestore has no DDL or migrations. Collections are created automatically
when you first write a document. Use these constants so collection names
stay consistent.

Example:
    from cms.infrastructure.firebase.client import get_firestore_client
    from cms.infrastructure.firebase.collections import COLLECTION_CONTENT

    db = get_firestore_client()
    if db:
        await db.collection(COLLECTION_CONTENT).document("navHome").set({"value": {...}})
"""

# One document per editable key: {"value": str | {lang: str, ...}}
COLLECTION_CONTENT = "content"

# Structured settings documents (environment profiles)
COLLECTION_SETTINGS = "settings"

# User-created color palettes
COLLECTION_THEMES = "predefinedThemes"
