"""Core infrastructure: logging and HTTP transport."""

from portfolio_client.core.http_client import HTTPClientFactory
from portfolio_client.core.logging import get_logger, setup_logging


__all__ = ["HTTPClientFactory", "get_logger", "setup_logging"]
