"""Tests for structured logging of client events."""

import httpx
import pytest
from structlog.testing import capture_logs

from portfolio_client.auth.exceptions import RequestError, SessionExpiredError
from portfolio_client.core.logging import get_logger


class TestClientLogging:
    """Test that request outcomes are logged without leaking credentials."""

    def test_get_logger_binds_values(self):
        with capture_logs() as logs:
            get_logger(__name__, component="test").info("hello")

        assert logs == [{"component": "test", "event": "hello", "log_level": "info"}]

    @pytest.mark.asyncio
    async def test_session_expiry_is_logged(self, api_client, store, responder):
        store.write("secret-token")
        responder["status"] = httpx.codes.UNAUTHORIZED

        with capture_logs() as logs:
            with pytest.raises(SessionExpiredError):
                await api_client.api_request("/rulesets")

        events = [entry["event"] for entry in logs]
        assert "api_request_completed" in events
        assert "session_expired" in events
        assert all("secret-token" not in str(entry) for entry in logs)

    @pytest.mark.asyncio
    async def test_non_json_body_is_logged_not_raised(self, api_client, responder):
        responder["status"] = 500
        responder["content"] = b"boom"

        with capture_logs() as logs:
            with pytest.raises(RequestError, match="^boom$"):
                await api_client.api_request("/rulesets")

        events = [entry["event"] for entry in logs]
        assert "response_body_not_json" in events
        assert "request_failed" in events
