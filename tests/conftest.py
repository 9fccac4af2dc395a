"""Shared test fixtures for portfolio_client tests.

HTTP traffic never leaves the process: clients are built on
``httpx.MockTransport`` with a per-test handler.
"""

from collections.abc import AsyncGenerator, Callable
from typing import Any

import httpx
import pytest
import pytest_asyncio

from portfolio_client.auth.session import MemoryNavigator
from portfolio_client.auth.storage import SessionCredentialStore
from portfolio_client.client import ApiClient
from portfolio_client.config.settings import Settings
from portfolio_client.core.http_client import HTTPClientFactory
from portfolio_client.core.logging import setup_logging


Handler = Callable[[httpx.Request], httpx.Response]


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom settings."""
    config.option.asyncio_mode = "auto"
    setup_logging(json_logs=False, log_level_name="DEBUG")


class RecordingTransport(httpx.MockTransport):
    """Mock transport that remembers every request it served."""

    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def test_settings() -> Settings:
    return Settings(http={"base_url": "http://portfolio.test"})


@pytest.fixture
def session_storage() -> dict[str, str]:
    """Stand-in for the browser tab's sessionStorage."""
    return {}


@pytest.fixture
def store(session_storage: dict[str, str]) -> SessionCredentialStore:
    return SessionCredentialStore(session_storage)


@pytest.fixture
def navigator() -> MemoryNavigator:
    return MemoryNavigator("/rulesets")


@pytest.fixture
def responder() -> dict[str, Any]:
    """Mutable status, body and headers served by the default handler."""
    return {"status": 200, "content": b"", "headers": {}}


@pytest.fixture
def transport(responder: dict[str, Any]) -> RecordingTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            responder["status"],
            content=responder["content"],
            headers=responder["headers"],
        )

    return RecordingTransport(handler)


@pytest_asyncio.fixture
async def api_client(
    test_settings: Settings,
    store: SessionCredentialStore,
    navigator: MemoryNavigator,
    transport: RecordingTransport,
) -> AsyncGenerator[ApiClient, None]:
    http_client = HTTPClientFactory.create_client(test_settings, transport=transport)
    async with http_client:
        yield ApiClient(
            test_settings,
            store=store,
            navigator=navigator,
            http_client=http_client,
        )
