"""Core constants: languages, document ids and cache key prefixes.

Single source of truth for literal values shared across layers.
"""

# Languages. "es" is the canonical source language for every fallback chain.
CANONICAL_LANGUAGE = "es"
SUPPORTED_LANGUAGES = ("es", "en")

# Fixed document ids in the settings collection
ENVIRONMENT_DOCUMENT_ID = "systemEnvironment"

# Client-local key holding the selected theme id
ACTIVE_THEME_LOCAL_KEY = "activeThemeId"

# Id of the runtime style block rewritten by theme apply()
THEME_STYLE_ELEMENT_ID = "dynamic-theme-styles"

# Cache key prefixes
CACHE_PREFIX_CONTENT = "content"

# Delimiter for composite keys
CACHE_KEY_SEP = ":"
