"""Exceptions for Courier SDK."""

from typing import Any


class CourierError(Exception):
    """Base exception for all Courier SDK errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        """
        Initialize CourierError.

        Args:
            message: Error message
            status_code: HTTP status code if applicable
            body: Raw response body if one was read
        """
        self.message = message
        self.status_code = status_code
        self.body = body
        super().__init__(self.message)


class HttpConfigurationError(CourierError):
    """Raised when a request cannot be issued because its URL is malformed."""


class HttpTransportError(CourierError):
    """Raised when connecting, writing or reading fails."""


class HttpStatusError(CourierError):
    """Raised when the server answers with a status other than 200."""

    def __init__(self, status_code: int, body: str | None = None) -> None:
        """Initialize HttpStatusError."""
        super().__init__("HTTP status code not 200", status_code=status_code, body=body)

    def __str__(self) -> str:
        return f"{self.message}: {self.status_code} {self.body or ''}".rstrip()


class HttpStructuredError(CourierError):
    """Raised when an error response was decoded into the caller's failure type.

    ``payload`` holds the decoded value; its type tells callers which kind
    of failure the server reported.
    """

    def __init__(self, payload: Any, status_code: int, body: str | None = None) -> None:
        """Initialize HttpStructuredError."""
        self.payload = payload
        super().__init__(
            f"HTTP {status_code}: {type(payload).__name__}",
            status_code=status_code,
            body=body,
        )


class ResponseDecodeError(CourierError):
    """Raised when a response body is not valid JSON for the requested type."""

    def __init__(self, message: str = "Unable to decode response", body: str | None = None) -> None:
        """Initialize ResponseDecodeError."""
        super().__init__(message, body=body)
