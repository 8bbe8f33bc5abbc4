"""
Error normalization shared by the domain services.

Servers report failures as ``{"message": "..."}`` or
``{"message": ["first problem", ...]}``. Anything else falls back to a
generic text, so every failure ends up with exactly one non-empty message.
"""

from typing import Any, Optional

from shortlink_client.errors import APIError


def extract_message(payload: Any) -> Optional[str]:
    """Return the server-provided message, or None if there is no usable one."""
    if not isinstance(payload, dict):
        return None

    message = payload.get("message")
    if isinstance(message, (list, tuple)):
        message = message[0] if message else None

    if isinstance(message, str) and message.strip():
        return message
    return None


def normalize_error(error: Exception, fallback: str) -> APIError:
    """
    Convert any failure into an APIError carrying a single message.

    The taxonomy type is kept (a NotFoundError stays a NotFoundError);
    non-API exceptions become a plain APIError.
    """
    payload = error.payload if isinstance(error, APIError) else None
    message = extract_message(payload) or fallback

    if isinstance(error, APIError):
        return error.with_message(message)
    return APIError(message)
