"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Nothing here is required at load time: a deployment
without Firestore credentials still starts and serves compiled defaults.
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    The FIREBASE_* public config fields, GOOGLE_API_KEY and RESEND_API_KEY
    are only read as last-resort defaults for the environment profiles
    document; once an admin saves that document they are ignored.
    """

    # App
    app_name: str = "bilingual-cms"
    app_version: str = "1.0.0"
    debug: bool = False

    # Firestore (REST + google-auth): key (JSON string) or path to JSON file
    firebase_service_account_key: SecretStr | None = None
    firebase_service_account_path: str | None = None

    # Public Firebase web config (environment profile defaults). The
    # NEXT_PUBLIC_ names are what the web front end already uses.
    firebase_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("FIREBASE_API_KEY", "NEXT_PUBLIC_FIREBASE_API_KEY"),
    )
    firebase_auth_domain: str = Field(
        default="",
        validation_alias=AliasChoices(
            "FIREBASE_AUTH_DOMAIN", "NEXT_PUBLIC_FIREBASE_AUTH_DOMAIN"
        ),
    )
    firebase_project_id: str = Field(
        default="",
        validation_alias=AliasChoices(
            "FIREBASE_PROJECT_ID", "NEXT_PUBLIC_FIREBASE_PROJECT_ID"
        ),
    )
    firebase_storage_bucket: str = Field(
        default="",
        validation_alias=AliasChoices(
            "FIREBASE_STORAGE_BUCKET", "NEXT_PUBLIC_FIREBASE_STORAGE_BUCKET"
        ),
    )
    firebase_messaging_sender_id: str = Field(
        default="",
        validation_alias=AliasChoices(
            "FIREBASE_MESSAGING_SENDER_ID", "NEXT_PUBLIC_FIREBASE_MESSAGING_SENDER_ID"
        ),
    )
    firebase_app_id: str = Field(
        default="",
        validation_alias=AliasChoices("FIREBASE_APP_ID", "NEXT_PUBLIC_FIREBASE_APP_ID"),
    )
    google_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("GOOGLE_API_KEY", "NEXT_PUBLIC_GOOGLE_API_KEY"),
    )
    resend_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("RESEND_API_KEY"),
    )

    # Translation (Gemini via the Generative Language REST API, key = GOOGLE_API_KEY)
    translation_enabled: bool = True
    translation_model: str = "gemini-1.5-flash"
    translation_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    translation_timeout_seconds: float = 20.0

    # Identity token issued by the external session collaborator
    secret_key: SecretStr = SecretStr("")
    algorithm: str = "HS256"
    admin_emails: str = ""

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:9002"

    # Request
    request_id_header: str = "X-Request-ID"

    # Redis read-through cache for content entries
    redis_enabled: bool = False
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None
    cache_ttl_content: int = 300

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def validate_telemetry(self) -> "Settings":
        """Reject exporter names the telemetry setup does not know."""
        if self.telemetry_exporter not in ("console", "otlp", "none"):
            raise ValueError(
                f"telemetry_exporter must be 'console', 'otlp' or 'none', got: {self.telemetry_exporter!r}"
            )
        if self.telemetry_exporter == "otlp" and not self.telemetry_otlp_endpoint:
            raise ValueError(
                "TELEMETRY_OTLP_ENDPOINT is required when telemetry_exporter is 'otlp'."
            )
        return self

    @property
    def admin_email_set(self) -> frozenset[str]:
        """Lowercased admin addresses from ADMIN_EMAILS."""
        return frozenset(
            e.strip().lower() for e in self.admin_emails.split(",") if e.strip()
        )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
