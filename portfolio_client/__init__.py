"""Asynchronous API client and session layer for the portfolio manager."""

from portfolio_client.auth import (
    ClientError,
    CredentialStore,
    MemoryNavigator,
    Navigator,
    RequestError,
    SessionCredentialStore,
    SessionExpiredError,
    SessionGuard,
    resolve_route,
)
from portfolio_client.client import ApiClient
from portfolio_client.config import Settings, get_settings


__version__ = "0.1.0"

__all__ = [
    "ApiClient",
    "ClientError",
    "CredentialStore",
    "MemoryNavigator",
    "Navigator",
    "RequestError",
    "SessionCredentialStore",
    "SessionExpiredError",
    "SessionGuard",
    "Settings",
    "get_settings",
    "resolve_route",
]
