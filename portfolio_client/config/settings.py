from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .http import HTTPSettings
from .logging import LoggingSettings
from .session import SessionSettings


__all__ = ["Settings", "ConfigurationError", "get_settings"]


class ConfigurationError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


class Settings(BaseSettings):
    """
    Configuration settings for the portfolio API client.

    Settings are loaded from environment variables and an optional .env file.
    Environment variables take precedence over .env file values. Nested
    values use a double underscore, e.g. ``PORTFOLIO_HTTP__BASE_URL``.
    """

    model_config = SettingsConfigDict(
        env_prefix="PORTFOLIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )

    http: HTTPSettings = Field(
        default_factory=HTTPSettings,
        description="HTTP client configuration settings",
    )

    session: SessionSettings = Field(
        default_factory=SessionSettings,
        description="Credential storage and login redirect settings",
    )

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration",
    )

    @property
    def api_url(self) -> str:
        """Get the absolute URL of the API prefix."""
        return f"{self.http.base_url.rstrip('/')}{self.http.api_prefix}"

    @property
    def auth_url(self) -> str:
        """Get the absolute URL of the auth prefix."""
        return f"{self.http.base_url.rstrip('/')}{self.http.auth_prefix}"


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process."""
    try:
        return Settings()
    except ValueError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
