"""Exceptions raised by the API client."""


class ClientError(Exception):
    """Base exception for all client errors."""

    pass


class RequestError(ClientError):
    """Raised when a request does not end in a successful outcome.

    ``detail`` is a human-readable message suitable for display.
    """

    def __init__(self, detail: str, status_code: int | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


class SessionExpiredError(RequestError):
    """Raised after an authenticated call was rejected with HTTP 401.

    The session has already been cleared by the time this is raised.
    """

    def __init__(self, detail: str = "Session expired") -> None:
        super().__init__(detail, status_code=401)
