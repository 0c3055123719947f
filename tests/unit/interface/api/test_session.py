"""Unit tests for session token extraction."""

from fastapi import Request

from prep.config import AuthSettings
from prep.interface.api.session import extract_session_token

SETTINGS = AuthSettings()


def make_request(headers: dict[str, str]) -> Request:
    return Request(
        {
            "type": "http",
            "method": "POST",
            "path": "/api/auth/sync-user",
            "headers": [
                (name.lower().encode(), value.encode())
                for name, value in headers.items()
            ],
        }
    )


class TestExtractSessionToken:
    """Tests for extract_session_token()."""

    def test_bearer_header(self):
        request = make_request({"Authorization": "Bearer abc.def.ghi"})

        assert extract_session_token(request, SETTINGS) == "abc.def.ghi"

    def test_session_cookie(self):
        request = make_request({"Cookie": "__session=cookie.token"})

        assert extract_session_token(request, SETTINGS) == "cookie.token"

    def test_header_wins_over_cookie(self):
        """The Authorization header should take precedence."""
        request = make_request(
            {"Authorization": "Bearer header.token", "Cookie": "__session=cookie.token"}
        )

        assert extract_session_token(request, SETTINGS) == "header.token"

    def test_non_bearer_header_falls_back_to_cookie(self):
        request = make_request(
            {"Authorization": "Basic dXNlcjpwYXNz", "Cookie": "__session=cookie.token"}
        )

        assert extract_session_token(request, SETTINGS) == "cookie.token"

    def test_no_credentials(self):
        assert extract_session_token(make_request({}), SETTINGS) is None
