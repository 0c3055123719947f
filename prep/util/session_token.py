"""Session token utilities.

Clerk issues short-lived session JWTs whose "sub" claim is the Clerk user
id. In production they are RS256-signed and verified against the
instance's JWKS. Development and tests use an HS256 shared secret, and
create_session_token mints such tokens.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from prep.config import AuthSettings


class SessionClaims(BaseModel):
    """Verified session token claims."""

    sub: str  # External (identity provider) user id
    exp: datetime
    sid: str | None = None  # Provider session id
    azp: str | None = None  # Authorized party (frontend origin)


class SessionTokenError(Exception):
    """Session token is missing, malformed, expired or not trusted."""

    pass


def create_session_token(
    external_id: str,
    settings: AuthSettings,
    expires_in: timedelta = timedelta(minutes=5),
    azp: str | None = None,
) -> str:
    """Create an HS256 session token.

    Args:
        external_id: Identity provider user id (becomes "sub")
        settings: Authentication settings
        expires_in: Token lifetime
        azp: Optional authorized party claim

    Returns:
        Encoded JWT
    """
    now = datetime.now(timezone.utc)
    payload: dict = {
        "sub": external_id,
        "iat": now,
        "nbf": now,
        "exp": now + expires_in,
    }
    if azp:
        payload["azp"] = azp

    return jwt.encode(payload, settings.session_secret, algorithm=settings.session_algorithm)


def verify_session_token(
    token: str,
    settings: AuthSettings,
    jwks_client: jwt.PyJWKClient | None = None,
) -> SessionClaims:
    """Verify and decode a session token.

    Args:
        token: Encoded JWT
        settings: Authentication settings
        jwks_client: JWKS client, required to verify RS256 tokens

    Returns:
        Verified claims

    Raises:
        SessionTokenError: If the token is invalid, expired or from an
            unauthorized party
    """
    try:
        if jwks_client is not None:
            signing_key = jwks_client.get_signing_key_from_jwt(token)
            payload = jwt.decode(
                token,
                signing_key.key,
                algorithms=["RS256"],
                options={"require": ["sub", "exp"]},
            )
        else:
            payload = jwt.decode(
                token,
                settings.session_secret,
                algorithms=[settings.session_algorithm],
                options={"require": ["sub", "exp"]},
            )
    except jwt.ExpiredSignatureError:
        raise SessionTokenError("Session has expired")
    except jwt.PyJWKClientError as e:
        raise SessionTokenError(f"Unable to fetch signing key: {e}")
    except jwt.InvalidTokenError:
        raise SessionTokenError("Invalid session token")

    claims = SessionClaims(**payload)

    if settings.authorized_parties and claims.azp not in settings.authorized_parties:
        raise SessionTokenError("Session issued for an unauthorized party")

    return claims
