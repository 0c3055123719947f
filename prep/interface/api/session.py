"""Session token extraction."""

from fastapi import Request

from prep.config import AuthSettings

BEARER_PREFIX = "bearer "


def extract_session_token(request: Request, auth_settings: AuthSettings) -> str | None:
    """Read the identity provider session token from a request.

    The Authorization bearer header wins over the session cookie.

    Args:
        request: Incoming request
        auth_settings: Authentication settings (cookie name)

    Returns:
        Session token, or None when the request carries none
    """
    authorization = request.headers.get("authorization")
    if authorization and authorization.lower().startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX) :].strip()
        if token:
            return token

    return request.cookies.get(auth_settings.session_cookie_name) or None
