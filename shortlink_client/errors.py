"""
Error taxonomy for remote API failures.

The HTTP client classifies every failed call into exactly one of these
types, so callers branch on the exception class instead of status codes:

- ValidationError: rejected input (client-side check or HTTP 400/422)
- AuthError: HTTP 401, session has already been torn down
- PermissionDeniedError: HTTP 403
- NotFoundError: HTTP 404
- ServerError: HTTP 5xx
- NetworkError: timeout or unreachable host (no response at all)
"""

from typing import Any, Optional


class APIError(Exception):
    """Base class for every failure raised by the client."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        payload: Any = None
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

    def with_message(self, message: str) -> "APIError":
        """Return a copy of this error (same type) carrying a new message."""
        return type(self)(message, status_code=self.status_code, payload=self.payload)

    def __str__(self) -> str:
        return self.message


class ValidationError(APIError):
    pass


class AuthError(APIError):
    pass


class PermissionDeniedError(APIError):
    pass


class NotFoundError(APIError):
    pass


class ServerError(APIError):
    pass


class NetworkError(APIError):
    pass


def error_for_status(status_code: int, payload: Any = None) -> APIError:
    """Build the taxonomy error matching an HTTP status code."""
    message = f"Request failed with status {status_code}"

    if status_code == 401:
        error_class = AuthError
    elif status_code == 403:
        error_class = PermissionDeniedError
    elif status_code == 404:
        error_class = NotFoundError
    elif status_code in (400, 422):
        error_class = ValidationError
    elif status_code >= 500:
        error_class = ServerError
    else:
        error_class = APIError

    return error_class(message, status_code=status_code, payload=payload)
