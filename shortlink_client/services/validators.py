"""Client-side checks applied before a link is sent to the server."""

import re
from typing import Optional, Tuple
from urllib.parse import urlparse

SHORT_CODE_MIN_LENGTH = 3
SHORT_CODE_MAX_LENGTH = 20
SHORT_CODE_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+$")


def is_valid_url(url: str) -> bool:
    """True for absolute http(s) URLs with a host."""
    if not url or not isinstance(url, str):
        return False
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def validate_short_code(short_code: Optional[str]) -> Tuple[bool, str]:
    """
    Check a custom short code.

    An empty code is valid: the field is optional and the server
    generates one.

    Returns:
        (is_valid, message) where message is empty when valid
    """
    if not short_code:
        return True, ""

    if len(short_code) < SHORT_CODE_MIN_LENGTH:
        return False, f"Short code must be at least {SHORT_CODE_MIN_LENGTH} characters"

    if len(short_code) > SHORT_CODE_MAX_LENGTH:
        return False, f"Short code must be less than {SHORT_CODE_MAX_LENGTH} characters"

    if not SHORT_CODE_PATTERN.match(short_code):
        return False, "Short code can only contain letters, numbers, hyphens, and underscores"

    return True, ""
