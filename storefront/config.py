"""Application configuration."""

from typing import Literal

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class RegistrarSettings(BaseModel):
    """Domain registrar API configuration."""

    base_url: str = "https://registrar.example.com/api/v1"

    # Bearer token sent with every registrar request
    api_token: str = "CHANGE_ME_IN_PRODUCTION"  # Must be overridden in production

    # Request timeout in seconds
    timeout: float = 30.0


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested values:

        ENVIRONMENT=production
        REGISTRAR__BASE_URL=https://registrar.internal/api/v1
        REGISTRAR__API_TOKEN=...
        OBSERVABILITY__LOGFIRE_TOKEN=...
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows REGISTRAR__BASE_URL syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Nested settings
    registrar: RegistrarSettings = RegistrarSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
