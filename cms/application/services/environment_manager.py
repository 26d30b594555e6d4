"""Environment configuration manager.

Named credential profiles ("production", "backup", ...) live together in
one settings document with an ``activeEnvironment`` selector. Writes are
merges: saving one profile never touches the fields of another.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from cms.application.dtos.content import OperationResult
from cms.application.dtos.environment import (
    EnvironmentProfile,
    EnvironmentProfiles,
    FirebaseConfig,
)
from cms.application.interfaces.repositories import ISettingsDocumentRepository
from cms.core.config import Settings
from cms.core.constants import ENVIRONMENT_DOCUMENT_ID
from cms.domain.enums import EnvironmentName
from cms.domain.exceptions import ResourceNotFoundException
from cms.shared.telemetry.tracing import traced
from cms.shared.utils.validation import field_errors

logger = logging.getLogger(__name__)

# Export key names, in output order (the web front end's .env names).
_FIREBASE_EXPORT_KEYS: tuple[tuple[str, str], ...] = (
    ("api_key", "NEXT_PUBLIC_FIREBASE_API_KEY"),
    ("auth_domain", "NEXT_PUBLIC_FIREBASE_AUTH_DOMAIN"),
    ("project_id", "NEXT_PUBLIC_FIREBASE_PROJECT_ID"),
    ("storage_bucket", "NEXT_PUBLIC_FIREBASE_STORAGE_BUCKET"),
    ("messaging_sender_id", "NEXT_PUBLIC_FIREBASE_MESSAGING_SENDER_ID"),
    ("app_id", "NEXT_PUBLIC_FIREBASE_APP_ID"),
)
_GOOGLE_API_KEY_EXPORT = "NEXT_PUBLIC_GOOGLE_API_KEY"
_RESEND_API_KEY_EXPORT = "RESEND_API_KEY"


def _secret(value: Any) -> str | None:
    if value is None:
        return None
    return value.get_secret_value() or None


def profile_from_settings(settings: Settings) -> EnvironmentProfile:
    """Build a profile from process-level configuration."""
    return EnvironmentProfile(
        firebase_config=FirebaseConfig(
            api_key=settings.firebase_api_key,
            auth_domain=settings.firebase_auth_domain,
            project_id=settings.firebase_project_id,
            storage_bucket=settings.firebase_storage_bucket,
            messaging_sender_id=settings.firebase_messaging_sender_id,
            app_id=settings.firebase_app_id,
        ),
        google_api_key=_secret(settings.google_api_key),
        resend_api_key=_secret(settings.resend_api_key),
    )


def default_profiles(settings: Settings) -> EnvironmentProfiles:
    """Profiles used before an administrator ever saves the document.

    production mirrors the process environment; backup starts empty.
    """
    return EnvironmentProfiles(
        active_environment=EnvironmentName.PRODUCTION.value,
        profiles={
            EnvironmentName.PRODUCTION.value: profile_from_settings(settings),
            EnvironmentName.BACKUP.value: EnvironmentProfile(),
        },
    )


def missing_firebase_fields(name: str, profile: EnvironmentProfile) -> list[dict[str, str]]:
    """Return a field error for every empty firebaseConfig entry of profile."""
    errors: list[dict[str, str]] = []
    config = profile.firebase_config.model_dump(by_alias=True)
    for key, value in config.items():
        if not str(value).strip():
            errors.append(
                {
                    "field": f"profiles.{name}.firebaseConfig.{key}",
                    "message": "is required",
                }
            )
    return errors


def export_profile_as_text(profiles: EnvironmentProfiles, name: str) -> str:
    """Format one profile as newline-separated KEY=value lines.

    Raises:
        ResourceNotFoundException: If the profile does not exist.
    """
    profile = profiles.profiles.get(name)
    if profile is None:
        raise ResourceNotFoundException("environment profile", name)
    config = profile.firebase_config
    lines = [f"{env_key}={getattr(config, attr)}" for attr, env_key in _FIREBASE_EXPORT_KEYS]
    lines.append(f"{_GOOGLE_API_KEY_EXPORT}={profile.google_api_key or ''}")
    lines.append(f"{_RESEND_API_KEY_EXPORT}={profile.resend_api_key or ''}")
    return "\n".join(lines)


class EnvironmentConfigManager:
    """Read, merge-write, switch and export environment profiles."""

    def __init__(self, repo: ISettingsDocumentRepository, settings: Settings) -> None:
        self._repo = repo
        self._settings = settings

    @traced("environment.read")
    async def read(self) -> EnvironmentProfiles:
        """Return the stored profiles, or defaults from configuration if absent."""
        doc = await self._repo.get_document(ENVIRONMENT_DOCUMENT_ID)
        if not doc:
            return default_profiles(self._settings)
        try:
            return EnvironmentProfiles.model_validate(doc)
        except ValidationError:
            logger.warning(
                "Stored environment document is malformed; using configured defaults",
                exc_info=True,
            )
            return default_profiles(self._settings)

    @traced("environment.write")
    async def write(
        self,
        profiles: Mapping[str, EnvironmentProfile | Mapping[str, Any]],
        active_environment: str | None = None,
    ) -> OperationResult:
        """Merge the given profiles (and optionally the selector) into the document.

        Every given profile must have a complete firebaseConfig; nothing is
        written otherwise.
        """
        validated: dict[str, EnvironmentProfile] = {}
        errors: list[dict[str, str]] = []
        try:
            candidate = EnvironmentProfiles.model_validate(
                {
                    "activeEnvironment": active_environment or EnvironmentName.PRODUCTION.value,
                    "profiles": {
                        name: (
                            p.model_dump(by_alias=True)
                            if isinstance(p, EnvironmentProfile)
                            else p
                        )
                        for name, p in profiles.items()
                    },
                }
            )
        except ValidationError as e:
            return OperationResult(False, "Invalid environment settings.", field_errors(e))

        for name, profile in candidate.profiles.items():
            errors.extend(missing_firebase_fields(name, profile))
            validated[name] = profile
        if active_environment is not None:
            current = await self.read()
            if active_environment not in validated and active_environment not in current.profiles:
                errors.append(
                    {"field": "activeEnvironment", "message": "unknown environment profile"}
                )
        if errors:
            logger.info("Rejected environment update with %d invalid field(s)", len(errors))
            return OperationResult(False, "Invalid environment settings.", errors)

        data: dict[str, Any] = {
            "profiles": {
                name: profile.model_dump(by_alias=True, exclude_none=True)
                for name, profile in validated.items()
            }
        }
        if active_environment is not None:
            data["activeEnvironment"] = active_environment
        try:
            await self._repo.merge_document(ENVIRONMENT_DOCUMENT_ID, data)
        except Exception as e:
            logger.exception("Environment update failed")
            return OperationResult(False, f"Failed to update environment: {e}")

        logger.info("Environment profiles updated: %s", ", ".join(sorted(validated)))
        return OperationResult(True, "Environment settings updated successfully.")

    async def set_active(self, name: str) -> OperationResult:
        """Select the active profile.

        Raises:
            ResourceNotFoundException: If no such profile exists.
        """
        current = await self.read()
        if name not in current.profiles:
            raise ResourceNotFoundException("environment profile", name)
        try:
            await self._repo.merge_document(ENVIRONMENT_DOCUMENT_ID, {"activeEnvironment": name})
        except Exception as e:
            logger.exception("Switching active environment failed")
            return OperationResult(False, f"Failed to switch environment: {e}")
        logger.info("Active environment set to %s", name)
        return OperationResult(True, f"Active environment set to {name}.")

    async def active_profile(self) -> EnvironmentProfile | None:
        current = await self.read()
        return current.profiles.get(current.active_environment)

    async def export_as_text(self, name: str) -> str:
        """Read the document and format one profile for copy-to-clipboard."""
        return export_profile_as_text(await self.read(), name)

    async def get_system_environment(self) -> EnvironmentProfiles:
        return await self.read()

    async def update_system_environment(self, profiles: EnvironmentProfiles) -> OperationResult:
        return await self.write(profiles.profiles, profiles.active_environment)
