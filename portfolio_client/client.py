"""Request executor for the portfolio backend.

``ApiClient`` is the only way the rest of an application talks to the
backend. It attaches the bearer credential, dispatches the request, and
feeds the response through the normalizer. An authenticated call rejected
with HTTP 401 logs the user out before the error reaches the caller.
"""

import json
from collections.abc import Mapping
from typing import Any

import httpx

from portfolio_client.auth.exceptions import RequestError, SessionExpiredError
from portfolio_client.auth.routing import resolve_route
from portfolio_client.auth.session import MemoryNavigator, Navigator, SessionGuard
from portfolio_client.auth.storage import CredentialStore, SessionCredentialStore
from portfolio_client.config.settings import Settings, get_settings
from portfolio_client.core.http_client import HTTPClientFactory
from portfolio_client.core.logging import get_logger
from portfolio_client.http.response import (
    Empty,
    Failure,
    ResponseOutcome,
    SessionExpired,
    normalize,
)


logger = get_logger(__name__)

JSON_CONTENT_TYPE = "application/json"


class ApiClient:
    """Asynchronous client for the API and token endpoints.

    Args:
        settings: Client settings; loaded from the environment when omitted
        store: Credential store shared with the routing layer
        navigator: Location capability used on forced logout
        http_client: Pre-built ``httpx.AsyncClient``; the caller keeps
            ownership and must close it
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        store: CredentialStore | None = None,
        navigator: Navigator | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        session_settings = self.settings.session

        self.store = store or SessionCredentialStore(key=session_settings.token_key)
        self.navigator = navigator or MemoryNavigator()
        self.guard = SessionGuard(
            self.store,
            self.navigator,
            login_path=session_settings.login_path,
            expired_message=session_settings.expired_message,
        )

        self._owns_client = http_client is None
        self._client = http_client or HTTPClientFactory.create_client(self.settings)

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # ==================== Public surface ====================

    async def api_request(
        self,
        path: str,
        *,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Call an authenticated JSON endpoint under the API prefix.

        Returns:
            The decoded payload, or None for a 204 response

        Raises:
            SessionExpiredError: The backend answered 401; the user has
                already been logged out
            RequestError: Any other failure
        """
        response = await self._send(
            self.settings.http.api_prefix,
            path,
            method=method,
            headers=self._build_headers(headers, json_body=True, authenticated=True),
            params=params,
            **_encode_body(body),
        )
        return self._resolve(await normalize(response, session_aware=True))

    async def auth_request(
        self,
        path: str,
        *,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Call an unauthenticated endpoint under the auth prefix.

        No credential is sent, and a 401 is reported as a plain
        ``RequestError`` (bad credentials) without logging anyone out.
        """
        response = await self._send(
            self.settings.http.auth_prefix,
            path,
            method=method,
            headers=self._build_headers(headers, json_body=True, authenticated=False),
            params=params,
            **_encode_body(body),
        )
        return self._resolve(await normalize(response, session_aware=False))

    async def api_upload(
        self,
        path: str,
        files: Mapping[str, Any],
        *,
        data: Mapping[str, Any] | None = None,
        method: str = "POST",
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send a multipart form to an authenticated endpoint.

        ``files`` and ``data`` take the same shapes as in httpx. The
        multipart Content-Type (with its boundary) is set by httpx.
        """
        response = await self._send(
            self.settings.http.api_prefix,
            path,
            method=method,
            headers=self._build_headers(headers, json_body=False, authenticated=True),
            files=files,
            data=data,
        )
        return self._resolve(await normalize(response, session_aware=True))

    async def api_download(self, path: str) -> httpx.Response | None:
        """Fetch binary content from an authenticated endpoint.

        On success the response is returned unread so the caller can stream
        it; the caller must close it, e.g.::

            response = await client.api_download("/backups/export")
            try:
                async for chunk in response.aiter_bytes():
                    ...
            finally:
                await response.aclose()

        Returns None for a 204 response.
        """
        response = await self._send(
            self.settings.http.api_prefix,
            path,
            method="GET",
            headers=self._build_headers(None, json_body=False, authenticated=True),
            stream=True,
        )
        if response.is_success and response.status_code != httpx.codes.NO_CONTENT:
            return response

        try:
            outcome = await normalize(response, session_aware=True)
        finally:
            await response.aclose()
        return self._resolve(outcome)

    # ==================== Session helpers ====================

    async def login(self, username: str, password: str) -> dict[str, Any]:
        """Exchange username and password for a token and store it.

        Returns:
            The token payload (``token``, ``tokenType``, ``expiresIn``)
        """
        payload = await self.auth_request(
            "/token",
            method="POST",
            body={"username": username, "password": password},
        )
        token = payload.get("token") if isinstance(payload, dict) else None
        if not token:
            raise RequestError("Login response did not include a token")

        self.store.write(token)
        logger.info("login_succeeded", username=username)
        return payload

    def logout(self) -> None:
        """Forget the credential and go to the login page."""
        self.store.clear()
        self.navigator.navigate_to(self.settings.session.login_path)
        logger.info("logged_out")

    def resolve_route(self, path: str) -> str | None:
        """Redirect target for navigating to ``path``, or None to proceed."""
        return resolve_route(
            path,
            self.store,
            login_path=self.settings.session.login_path,
            home_path=self.settings.session.home_path,
        )

    # ==================== Internals ====================

    def _build_headers(
        self,
        extra: Mapping[str, str] | None,
        *,
        json_body: bool,
        authenticated: bool,
    ) -> httpx.Headers:
        headers = httpx.Headers()
        if json_body:
            headers["Content-Type"] = JSON_CONTENT_TYPE
        if authenticated:
            token = self.store.read()
            if token:
                headers["Authorization"] = f"Bearer {token}"
        # Caller headers win; httpx.Headers compares keys case-insensitively
        if extra:
            headers.update(extra)
        return headers

    async def _send(
        self,
        prefix: str,
        path: str,
        *,
        method: str,
        headers: httpx.Headers,
        stream: bool = False,
        **request_kwargs: Any,
    ) -> httpx.Response:
        url = f"{prefix}{path}"
        request = self._client.build_request(
            method.upper(), url, headers=headers, **request_kwargs
        )
        try:
            response = await self._client.send(request, stream=stream)
        except httpx.TransportError as e:
            logger.warning(
                "transport_error",
                method=request.method,
                path=url,
                error_type=type(e).__name__,
                error=str(e),
            )
            detail = str(e) or type(e).__name__
            raise RequestError(f"Network error: {detail}") from e

        logger.debug(
            "api_request_completed",
            method=request.method,
            path=url,
            status_code=response.status_code,
        )
        return response

    def _resolve(self, outcome: ResponseOutcome) -> Any:
        if isinstance(outcome, SessionExpired):
            self.guard.handle_unauthorized()
            raise SessionExpiredError()

        if isinstance(outcome, Failure):
            logger.info(
                "request_failed",
                status_code=outcome.status_code,
                detail=outcome.detail,
            )
            raise RequestError(outcome.detail, status_code=outcome.status_code)

        if isinstance(outcome, Empty):
            return None

        return outcome.payload


def _encode_body(body: Any) -> dict[str, Any]:
    """Request kwargs for a body: raw str/bytes as-is, anything else as JSON."""
    if body is None:
        return {}
    if isinstance(body, str | bytes):
        return {"content": body}
    return {"content": json.dumps(body)}
