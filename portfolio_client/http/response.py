"""Response normalization.

Every response the client receives passes through :func:`normalize`, which
turns it into exactly one :data:`ResponseOutcome`. Bodies are decoded once by
:func:`parse_body`; both the success and the failure path read from the
resulting :class:`ParsedBody`, so a malformed body can never raise here.
"""

import json
from dataclasses import dataclass, field
from typing import Any

import httpx

from portfolio_client.core.logging import get_logger


logger = get_logger(__name__)

_HTML_MARKERS = ("<!doctype", "<html")
_DETAIL_FIELDS = ("detail", "message")


@dataclass(frozen=True)
class ParsedBody:
    """Decoded body plus the raw text it came from.

    ``data`` is an empty mapping when the body is empty or not JSON; ``text``
    is kept regardless so error details have a fallback source.
    """

    data: Any = field(default_factory=dict)
    text: str = ""


@dataclass(frozen=True)
class Success:
    payload: Any


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Failure:
    detail: str
    status_code: int


@dataclass(frozen=True)
class SessionExpired:
    pass


ResponseOutcome = Success | Empty | Failure | SessionExpired


async def parse_body(response: httpx.Response) -> ParsedBody:
    """Read and decode a response body without raising on bad content."""
    try:
        await response.aread()
        # httpx keeps a UTF-8 BOM in .text; json.loads rejects it
        text = response.text.removeprefix("\ufeff")
    except httpx.HTTPError as e:
        logger.warning(
            "response_body_unreadable",
            status_code=response.status_code,
            error=str(e),
        )
        return ParsedBody()

    if not text:
        return ParsedBody()

    try:
        data = json.loads(text)
    except (ValueError, RecursionError):
        logger.debug(
            "response_body_not_json",
            status_code=response.status_code,
            length=len(text),
        )
        return ParsedBody(data={}, text=text)

    return ParsedBody(data=data, text=text)


def looks_like_html(text: str) -> bool:
    """True when ``text`` starts like an HTML document."""
    head = text.lstrip()[:16].lower()
    return head.startswith(_HTML_MARKERS)


def extract_error_detail(parsed: ParsedBody, response: httpx.Response) -> str:
    """Pick the most useful human-readable message for a failed response.

    Order of preference: a ``detail`` or ``message`` field of a JSON object,
    then the raw body text unless it is an HTML page, then a message built
    from the status line.
    """
    if isinstance(parsed.data, dict):
        for name in _DETAIL_FIELDS:
            value = parsed.data.get(name)
            if isinstance(value, str):
                value = value.strip()
            if value:
                return str(value)

    text = parsed.text.strip()
    if text and not looks_like_html(text):
        return text

    reason = response.reason_phrase or "Request failed"
    return f"{reason} (HTTP {response.status_code})"


async def normalize(
    response: httpx.Response, *, session_aware: bool = True
) -> ResponseOutcome:
    """Classify a response.

    Args:
        response: Response to interpret; its body is read if needed
        session_aware: Treat 401 as session expiry. False for the token
            endpoint, where 401 just means the credentials were wrong.
    """
    if session_aware and response.status_code == httpx.codes.UNAUTHORIZED:
        return SessionExpired()

    if response.status_code == httpx.codes.NO_CONTENT:
        return Empty()

    parsed = await parse_body(response)
    if response.is_success:
        return Success(parsed.data)

    return Failure(
        detail=extract_error_detail(parsed, response),
        status_code=response.status_code,
    )
