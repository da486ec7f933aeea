"""
Provisioner settings using pydantic-settings for type-safe configuration.

Values come from environment variables, falling back to a .env file, then to
the defaults below. Only CORALOGIX_API_KEY has no usable default.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from coralogix import CoralogixConfig
from coralogix.client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

from .errors import ConfigError

DEFAULT_WEBHOOK_URL = "https://bptfmrfiz7.execute-api.eu-north-1.amazonaws.com/default/fn-webhook"


class Settings(BaseSettings):
    """Provisioner settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # === Coralogix API ===
    coralogix_api_key: str = Field(
        default="",
        description="Coralogix management API key (sent verbatim as the Authorization header)",
    )
    coralogix_api_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Coralogix management OpenAPI base URL for your region",
    )
    coralogix_api_timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        gt=0,
        description="Per-request timeout in seconds",
    )

    # === Webhook ===
    webhook_url: str = Field(
        default=DEFAULT_WEBHOOK_URL,
        description="URL the outgoing webhook calls when the alert fires",
    )
    webhook_name: str = Field(
        default="AWS fn webhook",
        description="Display name of the outgoing webhook",
    )

    # === Alert ===
    error_number: str = Field(
        default="50",
        description="Error number matched in log bodies as 'error: <number>'",
    )
    application_name: str = Field(default="sample-app", description="Application label filter")
    subsystem_name: str = Field(default="yak", description="Subsystem label filter")
    alert_threshold: float = Field(
        default=2,
        ge=0,
        description="Alert fires when matching logs exceed this count within the time window",
    )
    alert_name: str = Field(
        default="",
        description="Alert name (derived from the error number when empty)",
    )
    alert_description: str = Field(
        default="This alert triggers when the error number exceeds a threshold.",
        description="Alert description",
    )

    @field_validator("coralogix_api_url", "webhook_url", mode="after")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Require an absolute http(s) URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid URL: {v!r}. Must start with http:// or https://")
        return v

    @field_validator("error_number", mode="after")
    @classmethod
    def validate_error_number(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("ERROR_NUMBER must not be empty")
        return v

    def require_api_key(self) -> str:
        """Return the API key, raising ConfigError when it is missing."""
        api_key = self.coralogix_api_key.strip()
        if not api_key:
            raise ConfigError("CORALOGIX_API_KEY missing or empty in environment or .env file")
        return api_key

    def coralogix_config(self) -> CoralogixConfig:
        """Build the API client configuration."""
        return CoralogixConfig(
            api_key=self.require_api_key(),
            base_url=self.coralogix_api_url,
            timeout=self.coralogix_api_timeout,
        )


def load_settings(env_file: str | Path | None = ".env", require_api_key: bool = True) -> Settings:
    """Load settings, turning validation failures into ConfigError.

    Args:
        env_file: .env file to read after the process environment
        require_api_key: Raise ConfigError when CORALOGIX_API_KEY is missing or blank.
            Only a dry run, which never calls the API, should pass False.
    """
    try:
        settings = Settings(_env_file=env_file)  # type: ignore[call-arg]
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    if require_api_key:
        settings.require_api_key()
    return settings

