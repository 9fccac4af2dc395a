"""Credential storage implementations."""

from portfolio_client.auth.storage.base import CredentialStore
from portfolio_client.auth.storage.session import (
    DEFAULT_TOKEN_KEY,
    SessionCredentialStore,
)


__all__ = [
    "CredentialStore",
    "DEFAULT_TOKEN_KEY",
    "SessionCredentialStore",
]
