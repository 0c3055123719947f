"""Session verification domain service."""

import asyncio

import jwt
import logfire

from prep.config import AuthSettings
from prep.domain.value.types import ExternalId
from prep.util.session_token import (
    SessionClaims,
    SessionTokenError,
    verify_session_token,
)


class SessionService:
    """Domain service for identity provider session tokens."""

    def __init__(
        self, auth_settings: AuthSettings, jwks_client: jwt.PyJWKClient | None = None
    ) -> None:
        """Initialize session service.

        Args:
            auth_settings: Authentication settings
            jwks_client: JWKS client for RS256 verification (None for HS256)
        """
        self.auth_settings = auth_settings
        self.jwks_client = jwks_client

    async def verify_token(self, token: str) -> SessionClaims:
        """Verify a session token and extract its claims.

        RS256 verification runs in a worker thread because PyJWKClient
        fetches signing keys with blocking I/O.

        Args:
            token: Session JWT

        Returns:
            Verified claims

        Raises:
            SessionTokenError: If token is invalid or expired
        """
        with logfire.span("session_service.verify_token"):
            try:
                if self.jwks_client is None:
                    claims = verify_session_token(token, self.auth_settings)
                else:
                    claims = await asyncio.to_thread(
                        verify_session_token,
                        token,
                        self.auth_settings,
                        self.jwks_client,
                    )
            except Exception as e:
                logfire.warn("Session token verification failed", error=str(e))
                raise
            logfire.debug("Session token verified", external_id=claims.sub)
            return claims

    async def get_external_id_from_token(
        self, token: str | None
    ) -> ExternalId | None:
        """Extract the external user id without raising.

        Args:
            token: Session JWT (optional)

        Returns:
            External id if the token is valid, None if missing or invalid
        """
        if not token:
            return None

        try:
            claims = await self.verify_token(token)
            return ExternalId(claims.sub)
        except (SessionTokenError, ValueError):
            # Unusable token, treat the caller as anonymous
            return None
