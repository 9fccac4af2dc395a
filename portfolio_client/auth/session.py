"""Forced logout when an authenticated call is rejected.

The guard keeps no state of its own. Each time it runs it looks at the
status code it was handed and the navigator's current path; the credential
store and the page location are the only memory involved.
"""

from typing import Protocol, runtime_checkable
from urllib.parse import quote, urlencode, urlsplit

import httpx

from portfolio_client.auth.storage.base import CredentialStore
from portfolio_client.core.logging import get_logger


logger = get_logger(__name__)

DEFAULT_LOGIN_PATH = "/login"
DEFAULT_EXPIRED_MESSAGE = "Session expired; please log in again."


@runtime_checkable
class Navigator(Protocol):
    """Location capability used to send the user to the login page."""

    def get_current_path(self) -> str:
        """Return the path of the page currently shown."""
        ...

    def navigate_to(self, url: str) -> None:
        """Navigate to ``url``, adding a history entry."""
        ...

    def replace(self, url: str) -> None:
        """Replace the current location with ``url`` without navigating away."""
        ...


class MemoryNavigator:
    """Headless navigator that records where it was sent."""

    def __init__(self, url: str = "/") -> None:
        self.url = url
        self.navigations: list[str] = []
        self.replacements: list[str] = []

    def get_current_path(self) -> str:
        return urlsplit(self.url).path

    def navigate_to(self, url: str) -> None:
        self.navigations.append(url)
        self.url = url

    def replace(self, url: str) -> None:
        self.replacements.append(url)
        self.url = url


class SessionGuard:
    """Clears the credential and redirects to login on HTTP 401."""

    def __init__(
        self,
        store: CredentialStore,
        navigator: Navigator,
        *,
        login_path: str = DEFAULT_LOGIN_PATH,
        expired_message: str = DEFAULT_EXPIRED_MESSAGE,
    ) -> None:
        self.store = store
        self.navigator = navigator
        self.login_path = login_path
        self.expired_message = expired_message

    @staticmethod
    def is_session_invalid(status_code: int) -> bool:
        return status_code == httpx.codes.UNAUTHORIZED

    def login_target(self, reason: str | None = None) -> str:
        """Build the login URL, carrying ``reason`` as the ``message`` query."""
        if not reason:
            return self.login_path
        query = urlencode({"message": reason}, quote_via=quote)
        return f"{self.login_path}?{query}"

    def handle_unauthorized(self, reason: str | None = None) -> str:
        """Log the user out and send them to the login page.

        Already being on the login page results in a replace instead of a
        navigation, so concurrent 401s never loop or navigate twice.

        Returns:
            The login target that was applied
        """
        self.store.clear()
        target = self.login_target(reason or self.expired_message)

        current_path = self.navigator.get_current_path()
        if current_path != self.login_path:
            logger.warning("session_expired", from_path=current_path)
            self.navigator.navigate_to(target)
        else:
            logger.debug("session_expired_on_login_page")
            self.navigator.replace(target)
        return target
