"""HTTP transport construction for the portfolio API client.

All requests share one ``httpx.AsyncClient`` per ``ApiClient``; this module
decides how that client is configured.
"""

import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import httpx

from portfolio_client.config.settings import Settings, get_settings
from portfolio_client.core.logging import get_logger


logger = get_logger(__name__)


class HTTPClientFactory:
    """Factory for creating configured HTTP clients.

    Provides centralized configuration for:
    - Base URL of the backend
    - Timeouts (this is the only place a timeout is applied)
    - Proxy and TLS settings taken from the environment
    """

    @staticmethod
    def create_client(
        settings: Settings | None = None,
        *,
        max_keepalive_connections: int = 20,
        max_connections: int = 100,
        **kwargs: Any,
    ) -> httpx.AsyncClient:
        """Create an HTTP client from settings.

        Args:
            settings: Settings object; the cached process settings when omitted
            max_keepalive_connections: Max keep-alive connections for reuse
            max_connections: Max total concurrent connections
            **kwargs: Additional httpx.AsyncClient arguments

        Returns:
            Configured httpx.AsyncClient instance
        """
        settings = settings or get_settings()
        http_settings = settings.http

        proxy = _get_proxy_url()

        verify: bool | str = http_settings.verify_ssl
        if verify:
            verify = _get_ssl_context()

        timeout = httpx.Timeout(
            connect=http_settings.timeout_connect,
            read=http_settings.timeout_read,
            write=http_settings.timeout_write,
            pool=http_settings.timeout_pool,
        )

        limits = httpx.Limits(
            max_keepalive_connections=max_keepalive_connections,
            max_connections=max_connections,
        )

        # A caller-supplied transport (e.g. httpx.MockTransport) wins
        if "transport" not in kwargs:
            kwargs["transport"] = httpx.AsyncHTTPTransport(
                limits=limits,
                http2=http_settings.http2,
                verify=verify,
                proxy=proxy,
            )

        client_config = {
            "base_url": http_settings.base_url,
            "timeout": timeout,
            **kwargs,
        }

        logger.debug(
            "http_client_created",
            base_url=http_settings.base_url,
            timeout_connect=http_settings.timeout_connect,
            timeout_read=http_settings.timeout_read,
            http2=http_settings.http2,
            has_proxy=proxy is not None,
        )

        return httpx.AsyncClient(**client_config)

    @staticmethod
    @asynccontextmanager
    async def managed_client(
        settings: Settings | None = None, **kwargs: Any
    ) -> AsyncGenerator[httpx.AsyncClient, None]:
        """Create a managed HTTP client with automatic cleanup.

        Example:
            async with HTTPClientFactory.managed_client() as client:
                response = await client.get("/api/rulesets")
        """
        client = HTTPClientFactory.create_client(settings, **kwargs)
        try:
            yield client
        finally:
            await client.aclose()
            logger.debug("managed_http_client_closed")


def _get_proxy_url() -> str | None:
    """Get proxy URL from environment variables.

    Returns:
        str or None: Proxy URL if any proxy is set
    """
    https_proxy = os.environ.get("HTTPS_PROXY") or os.environ.get("https_proxy")
    all_proxy = os.environ.get("ALL_PROXY")
    http_proxy = os.environ.get("HTTP_PROXY") or os.environ.get("http_proxy")

    proxy_url = https_proxy or all_proxy or http_proxy

    if proxy_url:
        logger.debug("proxy_configured", proxy_url=proxy_url)

    return proxy_url


def _get_ssl_context() -> str | bool:
    """Get SSL verification setting from environment variables.

    Returns:
        Path to a CA bundle, True for default verification, or False when
        SSL_VERIFY disables verification.
    """
    ca_bundle = os.environ.get("REQUESTS_CA_BUNDLE") or os.environ.get("SSL_CERT_FILE")
    ssl_verify = os.environ.get("SSL_VERIFY", "true").lower()

    if ca_bundle and Path(ca_bundle).exists():
        logger.debug("ssl_ca_bundle_configured", ca_bundle_path=ca_bundle)
        return ca_bundle
    elif ssl_verify in ("false", "0", "no"):
        logger.warning("ssl_verification_disabled", ssl_verify_value=ssl_verify)
        return False
    else:
        return True
