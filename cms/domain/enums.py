"""Domain enumerations for the content service.

Enums represent fixed sets of domain values (languages, environment
profiles, editable field states).
"""

from enum import Enum


class LanguageCode(str, Enum):
    """Languages the site is edited in. ES is the canonical source language."""

    ES = "es"
    EN = "en"

    @property
    def sibling(self) -> "LanguageCode":
        """Return the other supported language (the translation target)."""
        return LanguageCode.EN if self is LanguageCode.ES else LanguageCode.ES

    @classmethod
    def values(cls) -> list[str]:
        """Return all language codes as strings."""
        return [lang.value for lang in cls]


class EnvironmentName(str, Enum):
    """Named environment profiles in the environment settings document."""

    PRODUCTION = "production"
    BACKUP = "backup"

    @classmethod
    def values(cls) -> list[str]:
        """Return all profile names as strings."""
        return [env.value for env in cls]


class FieldState(str, Enum):
    """Editable field controller states. VIEWING is the only resting state."""

    VIEWING = "viewing"
    EDITING = "editing"
    SAVING = "saving"
