"""Errors raised by seeip calls.

Every failure of a single request surfaces as one of these, so callers can
branch on the kind of failure instead of parsing a message.
"""


class SeeIpError(Exception):
    """Base class for all seeip failures."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class TransportError(SeeIpError):
    """Raised when the request could not be sent or timed out."""


class RemoteStatusError(SeeIpError):
    """Raised when the API answers with a non-2xx status."""

    def __init__(self, status_code: int, reason: str = "", url: str | None = None) -> None:
        """Initialize the exception with the HTTP status.

        Args:
            status_code: The status code returned by the API.
            reason: The reason phrase, if any.
            url: The requested URL.
        """
        message = f"Non-successful status code received: {status_code}"
        if reason:
            message = f"{message} {reason}"
        super().__init__(message, url=url)
        self.status_code = status_code
        self.reason = reason


class DecodeError(SeeIpError):
    """Raised when the response body does not match the expected format."""
