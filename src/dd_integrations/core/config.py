"""
Configuration management for dd-integrations.

Handles loading configuration from environment variables and .env files.
Library code takes an explicit DDCredentials; only the CLI reads the
cached settings.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dd_integrations.constants import DDAPIConfig

AuthMode = Literal["query", "headers"]


# =============================================================================
# Datadog API Credentials
# =============================================================================


class DDCredentials(BaseModel):
    """
    Datadog API credentials.

    Attributes:
        api_key: Organization API key (stored securely)
        app_key: Application key (stored securely)
        api_url: API host, e.g. https://api.datadoghq.eu
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    api_key: SecretStr = Field(description="Datadog API key")
    app_key: SecretStr = Field(description="Datadog application key")
    api_url: Annotated[str, Field(default=DDAPIConfig.DEFAULT_HOST, min_length=1)]

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Host should carry a scheme and no trailing slash."""
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            v = "https://" + v
        return v


# =============================================================================
# Main Settings
# =============================================================================


class DDToolsSettings(BaseSettings):
    """
    Main settings for dd-integrations, loaded from environment and .env files.

    Environment variables (prefix DATADOG_):
        DATADOG_API_KEY, DATADOG_APP_KEY, DATADOG_HOST
        DATADOG_API_TIMEOUT, DATADOG_AUTH_MODE
        DATADOG_DEBUG, DATADOG_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="DATADOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Datadog API credentials
    api_key: SecretStr = SecretStr("")
    app_key: SecretStr = SecretStr("")
    host: str = DDAPIConfig.DEFAULT_HOST
    api_timeout: Annotated[int, Field(default=DDAPIConfig.DEFAULT_TIMEOUT, ge=1, le=300)]
    auth_mode: AuthMode = "query"

    # Logging
    debug: bool = False
    log_level: Annotated[str, Field(default="INFO", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")]

    @property
    def credentials(self) -> DDCredentials | None:
        """Get Datadog credentials if both keys are set."""
        if self.api_key.get_secret_value() and self.app_key.get_secret_value():
            return DDCredentials(
                api_key=self.api_key,
                app_key=self.app_key,
                api_url=self.host,
            )
        return None

    @property
    def has_credentials(self) -> bool:
        """Check if credentials are configured."""
        return self.credentials is not None

    @property
    def missing_credentials(self) -> list[str]:
        """Names of the environment variables still unset."""
        missing = []
        if not self.api_key.get_secret_value():
            missing.append("DATADOG_API_KEY")
        if not self.app_key.get_secret_value():
            missing.append("DATADOG_APP_KEY")
        return missing


# =============================================================================
# Singleton Settings Access
# =============================================================================

_settings: DDToolsSettings | None = None


def get_settings() -> DDToolsSettings:
    """
    Get the global settings instance.

    Creates a new instance on first call, returns cached instance thereafter.
    """
    global _settings
    if _settings is None:
        _settings = DDToolsSettings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance (useful for testing)."""
    global _settings
    _settings = None
