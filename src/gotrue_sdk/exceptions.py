"""
Exception classes for the GoTrue SDK.
"""

from __future__ import annotations

import json
from typing import Any

__all__ = [
    "GoTrueError",
    "ConfigurationError",
    "ConstructionError",
    "ValidationError",
    "TransportError",
    "NetworkError",
    "TimeoutError",
    "DecodeError",
    "APIError",
    "BadRequestError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "UnprocessableEntityError",
    "RateLimitError",
    "ServerError",
    "create_error_from_response",
    "translate_error",
    "unreadable_body_error",
]


class GoTrueError(Exception):
    """Base exception for GoTrue SDK errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: Any | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details
        self.status_code = status_code


class ConfigurationError(GoTrueError):
    """Raised when the client cannot be configured from the given settings."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "CONFIGURATION_ERROR")


class ConstructionError(GoTrueError):
    """Raised when the base URL and path do not form a valid request URL."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message, "CONSTRUCTION_ERROR")
        self.url = url


class ValidationError(GoTrueError):
    """Raised when a request is rejected before it is sent."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, "VALIDATION_ERROR", {"field": field} if field else None)
        self.field = field


class TransportError(GoTrueError):
    """Raised when the HTTP exchange itself fails."""

    def __init__(
        self, message: str = "Transport error", details: Any | None = None
    ) -> None:
        super().__init__(message, "TRANSPORT_ERROR", details)


class NetworkError(TransportError):
    """Raised when a network error occurs."""

    def __init__(
        self, message: str = "Network error", details: Any | None = None
    ) -> None:
        super().__init__(message, details)
        self.code = "NETWORK_ERROR"


class TimeoutError(TransportError):  # noqa: A001
    """Raised when a request times out."""

    def __init__(
        self, message: str = "Request timeout", details: Any | None = None
    ) -> None:
        super().__init__(message, details)
        self.code = "TIMEOUT_ERROR"


class DecodeError(GoTrueError):
    """Raised when a successful response does not match the expected shape."""

    def __init__(
        self, message: str, status_code: int, details: Any | None = None
    ) -> None:
        super().__init__(message, "DECODE_ERROR", details, status_code)


class APIError(GoTrueError):
    """Structured error for any non-2xx response from the Auth server.

    Attributes:
        status_code: HTTP status code of the response
        message: Error message reported by the server, or the raw body
        error_code: Server-specific error code, if any
        details: Additional error information, if any

    """

    status_code: int

    def __init__(
        self,
        status_code: int,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, error_code, details, status_code)
        self.error_code = error_code

    def __str__(self) -> str:
        if self.error_code:
            return (
                f"response status code {self.status_code} "
                f"(error_code: {self.error_code}): {self.message}"
            )
        return f"response status code {self.status_code}: {self.message}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(status_code={self.status_code!r}, "
            f"message={self.message!r}, error_code={self.error_code!r}, "
            f"details={self.details!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, APIError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.status_code == other.status_code
            and self.message == other.message
            and self.error_code == other.error_code
            and self.details == other.details
        )

    __hash__ = Exception.__hash__


class BadRequestError(APIError):
    """Raised on 400 Bad Request."""


class AuthenticationError(APIError):
    """Raised when authentication fails (401)."""


class AuthorizationError(APIError):
    """Raised when the token lacks the required permissions (403)."""


class NotFoundError(APIError):
    """Raised when a resource is not found (404)."""


class ConflictError(APIError):
    """Raised when a resource conflict occurs (409)."""


class UnprocessableEntityError(APIError):
    """Raised when the server rejects the request payload (422)."""


class RateLimitError(APIError):
    """Raised when rate limit is exceeded (429)."""


class ServerError(APIError):
    """Raised when a server error occurs (5xx)."""


_STATUS_ERRORS: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    409: ConflictError,
    422: UnprocessableEntityError,
    429: RateLimitError,
}


def create_error_from_response(
    status_code: int,
    message: str,
    error_code: str | None = None,
    details: dict[str, Any] | None = None,
) -> APIError:
    """Create an appropriate error instance based on HTTP status code."""
    if status_code >= 500:
        error_cls: type[APIError] = ServerError
    else:
        error_cls = _STATUS_ERRORS.get(status_code, APIError)
    return error_cls(status_code, message, error_code, details)


def _optional_str(payload: dict[str, Any], key: str) -> str | None:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(key)
    return value or None


def translate_error(status_code: int, body: bytes) -> APIError:
    """Translate a non-success response body into an APIError.

    The body is read as a JSON object with the optional fields ``error``,
    ``error_code``, ``message`` and ``details``. The message is taken from
    ``error``, then ``message``, then the raw body. A body that is not such an
    object is used verbatim as the message.

    Args:
        status_code: HTTP status code of the response
        body: Raw response body

    Returns:
        The structured error for the response. Never raises.

    """
    text = body.decode("utf-8", errors="replace")

    try:
        payload = json.loads(text)
        if not isinstance(payload, dict):
            raise TypeError("payload")
        error = _optional_str(payload, "error")
        message = _optional_str(payload, "message")
        error_code = _optional_str(payload, "error_code")
        details = payload.get("details")
        if details is not None and not isinstance(details, dict):
            raise TypeError("details")
    except (ValueError, TypeError, RecursionError):
        return create_error_from_response(status_code, text)

    return create_error_from_response(
        status_code,
        error or message or text,
        error_code,
        details,
    )


def unreadable_body_error(status_code: int, reason: BaseException) -> APIError:
    """Build the error for a non-success response whose body cannot be read."""
    return create_error_from_response(
        status_code, f"failed to read error response body: {reason}"
    )
