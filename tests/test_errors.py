import pytest

from shortlink_client.errors import (
    APIError,
    AuthError,
    NetworkError,
    NotFoundError,
    ServerError,
    error_for_status,
)
from shortlink_client.services.error_messages import extract_message, normalize_error
from shortlink_client.services.validators import is_valid_url, validate_short_code

FALLBACK = "Something went wrong"


class TestExtractMessage:
    @pytest.mark.parametrize("payload, expected", [
        ({"message": "Invalid credentials"}, "Invalid credentials"),
        ({"message": ["first", "second"]}, "first"),
        ({"message": []}, None),
        ({"message": ""}, None),
        ({"message": [None, "x"]}, None),
        ({"message": 42}, None),
        ({"detail": "Not found"}, None),
        ("plain text body", None),
        (None, None),
    ])
    def test_shapes(self, payload, expected):
        assert extract_message(payload) == expected


class TestNormalizeError:
    def test_keeps_error_type(self):
        error = NotFoundError("raw", status_code=404, payload={"message": "Link not found"})

        normalized = normalize_error(error, FALLBACK)

        assert type(normalized) is NotFoundError
        assert normalized.message == "Link not found"
        assert normalized.status_code == 404

    def test_unstructured_uses_fallback(self):
        normalized = normalize_error(NetworkError("Request timed out"), FALLBACK)

        assert isinstance(normalized, NetworkError)
        assert normalized.message == FALLBACK

    def test_foreign_exception_becomes_api_error(self):
        normalized = normalize_error(RuntimeError("boom"), FALLBACK)

        assert type(normalized) is APIError
        assert str(normalized) == FALLBACK


class TestErrorForStatus:
    def test_mapping(self):
        assert isinstance(error_for_status(401), AuthError)
        assert isinstance(error_for_status(404), NotFoundError)
        assert isinstance(error_for_status(504), ServerError)
        assert type(error_for_status(418)) is APIError


class TestValidators:
    @pytest.mark.parametrize("url, valid", [
        ("https://www.google.com/", True),
        ("http://localhost:3000/x?y=1", True),
        ("ftp://example.com", False),
        ("not-a-valid-url", False),
        ("https://", False),
        ("", False),
    ])
    def test_is_valid_url(self, url, valid):
        assert is_valid_url(url) is valid

    def test_short_code_optional(self):
        assert validate_short_code("") == (True, "")
        assert validate_short_code(None) == (True, "")

    def test_short_code_length(self):
        assert validate_short_code("ab")[0] is False
        assert validate_short_code("a" * 20)[0] is True
        assert validate_short_code("a" * 21)[0] is False

    def test_short_code_characters(self):
        assert validate_short_code("my_code-1") == (True, "")
        is_valid, message = validate_short_code("bad code!")
        assert is_valid is False
        assert "hyphens" in message
