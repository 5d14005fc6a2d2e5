"""Error hierarchy for SigninID SDK."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes raised by the SDK itself."""

    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_REQUEST = "INVALID_REQUEST"
    NETWORK_ERROR = "NETWORK_ERROR"
    TIMEOUT = "TIMEOUT"
    RATE_LIMITED = "RATE_LIMITED"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"

    def __str__(self) -> str:
        return self.value


class SigninIDError(Exception):
    """Base exception for all SigninID SDK errors.

    Also raised directly for API errors without a dedicated subclass, in
    which case ``code`` and ``message`` are the server's values verbatim.

    Attributes:
        code: Error code (an ``ErrorCode`` value or the server-provided code).
        message: Human readable error message.
        status: HTTP status code, or 0 for failures without a response.
    """

    def __init__(self, code: str, message: str, status: int) -> None:
        self.code = code
        self.message = message
        self.status = status
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={str(self.code)!r}, "
            f"message={self.message!r}, status={self.status})"
        )


class AuthenticationError(SigninIDError):
    """Secret key is missing, malformed or rejected (401)."""

    def __init__(self, message: str = "Invalid API key") -> None:
        super().__init__(ErrorCode.UNAUTHORIZED, message, 401)


class ValidationError(SigninIDError):
    """Request parameters were rejected by the server (400).

    Attributes:
        details: Opaque validation details from the server, if any.
    """

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(ErrorCode.INVALID_REQUEST, message, 400)
        self.details = details


class NetworkError(SigninIDError):
    """Network communication failure."""

    def __init__(self, message: str = "Network error occurred") -> None:
        super().__init__(ErrorCode.NETWORK_ERROR, message, 0)


class TimeoutError(SigninIDError):
    """Request did not complete within the configured timeout."""

    def __init__(self, message: str = "Request timed out") -> None:
        super().__init__(ErrorCode.TIMEOUT, message, 0)


class RateLimitError(SigninIDError):
    """Rate limit exceeded (429).

    Attributes:
        retry_after: Seconds to wait before retrying, when the server says so.
    """

    def __init__(
        self, message: str = "Rate limit exceeded", retry_after: float | None = None
    ) -> None:
        super().__init__(ErrorCode.RATE_LIMITED, message, 429)
        self.retry_after = retry_after
