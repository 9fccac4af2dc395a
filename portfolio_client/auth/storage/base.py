"""Abstract base class for credential storage."""

from abc import ABC, abstractmethod


class CredentialStore(ABC):
    """Owns the lifecycle of a single bearer token.

    Implementations never raise: storage is assumed available for the
    lifetime of the store.
    """

    @abstractmethod
    def read(self) -> str | None:
        """Return the current token, or None when logged out."""
        pass

    @abstractmethod
    def write(self, token: str | None) -> None:
        """Persist a token. An empty or missing token clears the store."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove any stored token. Safe to call repeatedly."""
        pass

    def has_token(self) -> bool:
        return self.read() is not None
