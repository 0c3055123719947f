"""Test configuration and fixtures."""

from datetime import timedelta

import logfire

from prep.config import Settings
from prep.util.session_token import create_session_token

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_session_token(
    external_id: str, expires_in: timedelta = timedelta(minutes=5)
) -> str:
    """Mint a session token the API under test will accept.

    Args:
        external_id: Identity provider user id (the "sub" claim)
        expires_in: Token lifetime, negative for an already expired token

    Returns:
        Encoded JWT signed with the configured session secret
    """
    return create_session_token(external_id, Settings().auth, expires_in=expires_in)


def auth_headers(external_id: str) -> dict[str, str]:
    """Authorization header carrying a fresh session token."""
    return {"Authorization": f"Bearer {make_session_token(external_id)}"}
