"""Session-scoped credential storage backed by a mutable mapping."""

from collections.abc import MutableMapping

from portfolio_client.auth.storage.base import CredentialStore
from portfolio_client.core.logging import get_logger


logger = get_logger(__name__)

DEFAULT_TOKEN_KEY = "jwt"


class SessionCredentialStore(CredentialStore):
    """Keeps the token under one key of a session-scoped mapping.

    The mapping plays the role of browser ``sessionStorage``: every client
    that shares it sees the same token, and nothing outside it does. When no
    mapping is given the store gets a private one.
    """

    def __init__(
        self,
        storage: MutableMapping[str, str] | None = None,
        key: str = DEFAULT_TOKEN_KEY,
    ) -> None:
        self._storage: MutableMapping[str, str] = {} if storage is None else storage
        self.key = key

    def read(self) -> str | None:
        return self._storage.get(self.key) or None

    def write(self, token: str | None) -> None:
        if not token:
            self.clear()
            return
        self._storage[self.key] = token
        logger.debug("credential_stored", key=self.key)

    def clear(self) -> None:
        if self._storage.pop(self.key, None) is not None:
            logger.debug("credential_cleared", key=self.key)
