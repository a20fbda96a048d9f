"""Unit tests for session token extraction."""

from fastapi import Request

from askboard.interface.api.session import extract_token


def _request(headers: dict[str, str]) -> Request:
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": "/",
            "headers": [
                (key.lower().encode(), value.encode()) for key, value in headers.items()
            ],
        }
    )


class TestExtractToken:
    """Tests for extract_token."""

    def test_cookie_wins_over_header(self):
        request = _request(
            {"Cookie": "auth-token=from-cookie", "Authorization": "Bearer from-header"}
        )

        assert extract_token(request, "auth-token") == "from-cookie"

    def test_bearer_header_is_used_without_cookie(self):
        request = _request({"Authorization": "bearer from-header"})

        assert extract_token(request, "auth-token") == "from-header"

    def test_other_schemes_are_ignored(self):
        request = _request({"Authorization": "Basic dXNlcjpwYXNz"})

        assert extract_token(request, "auth-token") is None

    def test_no_credentials(self):
        assert extract_token(_request({}), "auth-token") is None
