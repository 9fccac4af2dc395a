"""Credential storage, session expiry handling and route gating."""

from portfolio_client.auth.exceptions import (
    ClientError,
    RequestError,
    SessionExpiredError,
)
from portfolio_client.auth.routing import resolve_route
from portfolio_client.auth.session import MemoryNavigator, Navigator, SessionGuard
from portfolio_client.auth.storage import CredentialStore, SessionCredentialStore


__all__ = [
    "ClientError",
    "CredentialStore",
    "MemoryNavigator",
    "Navigator",
    "RequestError",
    "SessionCredentialStore",
    "SessionExpiredError",
    "SessionGuard",
    "resolve_route",
]
