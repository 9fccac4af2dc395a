"""Response interpretation for backend calls."""

from portfolio_client.http.response import (
    Empty,
    Failure,
    ParsedBody,
    ResponseOutcome,
    SessionExpired,
    Success,
    extract_error_detail,
    looks_like_html,
    normalize,
    parse_body,
)


__all__ = [
    "Empty",
    "Failure",
    "ParsedBody",
    "ResponseOutcome",
    "SessionExpired",
    "Success",
    "extract_error_detail",
    "looks_like_html",
    "normalize",
    "parse_body",
]
