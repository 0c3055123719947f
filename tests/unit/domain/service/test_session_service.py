"""Unit tests for SessionService."""

import threading
from datetime import timedelta

import jwt
import pytest

from prep.config import AuthSettings
from prep.domain.service import SessionService
from prep.domain.value.types import ExternalId
from prep.util.session_token import SessionTokenError, create_session_token

SETTINGS = AuthSettings(session_secret="unit-test-secret")


class RecordingJWKClient:
    """JWKS client double that records which thread fetched the key."""

    def __init__(self) -> None:
        self.thread_ids: list[int] = []

    def get_signing_key_from_jwt(self, token: str):
        self.thread_ids.append(threading.get_ident())
        raise jwt.PyJWKClientError("JWKS endpoint unreachable")


class TestSessionService:
    """Tests for SessionService."""

    @pytest.mark.asyncio
    async def test_valid_token_yields_external_id(self):
        """Should read the external id from the sub claim."""
        service = SessionService(SETTINGS)
        token = create_session_token("ext_123", SETTINGS)

        assert await service.get_external_id_from_token(token) == ExternalId("ext_123")

    @pytest.mark.asyncio
    async def test_missing_token_is_anonymous(self):
        """Should treat a missing token as unauthenticated."""
        service = SessionService(SETTINGS)

        assert await service.get_external_id_from_token(None) is None
        assert await service.get_external_id_from_token("") is None

    @pytest.mark.asyncio
    async def test_expired_token_is_anonymous(self):
        """Should treat an expired token as unauthenticated."""
        service = SessionService(SETTINGS)
        token = create_session_token(
            "ext_123", SETTINGS, expires_in=timedelta(minutes=-1)
        )

        assert await service.get_external_id_from_token(token) is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("sub", ["   ", "u" * 256])
    async def test_signed_token_with_unusable_sub_is_anonymous(self, sub):
        """Should treat a blank or oversized sub claim as unauthenticated."""
        service = SessionService(SETTINGS)
        token = create_session_token(sub, SETTINGS)

        assert await service.get_external_id_from_token(token) is None

    @pytest.mark.asyncio
    async def test_token_signed_with_other_secret_is_rejected(self):
        """Should reject tokens signed with a different secret."""
        service = SessionService(SETTINGS)
        token = create_session_token(
            "ext_123", AuthSettings(session_secret="someone-else")
        )

        with pytest.raises(SessionTokenError):
            await service.verify_token(token)

    @pytest.mark.asyncio
    async def test_unauthorized_party_is_rejected(self):
        """Should reject tokens issued for an origin not in authorized_parties."""
        settings = AuthSettings(
            session_secret="unit-test-secret",
            authorized_parties=["https://prep.example.com"],
        )
        service = SessionService(settings)
        token = create_session_token(
            "ext_123", settings, azp="https://evil.example.com"
        )

        assert await service.get_external_id_from_token(token) is None

    @pytest.mark.asyncio
    async def test_jwks_key_fetch_runs_off_the_event_loop(self):
        """Should fetch JWKS signing keys in a worker thread."""
        jwks_client = RecordingJWKClient()
        service = SessionService(SETTINGS, jwks_client=jwks_client)
        token = create_session_token("ext_123", SETTINGS)

        with pytest.raises(SessionTokenError):
            await service.verify_token(token)

        assert len(jwks_client.thread_ids) == 1
        assert jwks_client.thread_ids[0] != threading.get_ident()
