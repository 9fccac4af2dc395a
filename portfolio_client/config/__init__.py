"""Configuration for the portfolio API client."""

from .http import HTTPSettings
from .logging import LoggingSettings
from .session import SessionSettings
from .settings import ConfigurationError, Settings, get_settings


__all__ = [
    "ConfigurationError",
    "HTTPSettings",
    "LoggingSettings",
    "SessionSettings",
    "Settings",
    "get_settings",
]
