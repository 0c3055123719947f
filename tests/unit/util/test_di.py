"""Tests for container assembly and production configuration guards."""

import pytest

from prep.adapter.clerk.client import RealClerkClient
from prep.domain.service import IdentityProviderClient, SessionService
from prep.util.di import IdentityProvider, ProdIdentityProvider, get_provider
from prep.util.error import ConfigurationError
from tests.di import MockIdentityProvider, build_test_container


class TestProviderSelection:
    def test_component_resolves_to_mock_or_production(self):
        assert get_provider(IdentityProvider, use_mock=True) is MockIdentityProvider
        assert get_provider(IdentityProvider) is ProdIdentityProvider

    def test_unknown_component_rejected(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"billing"})


class TestProductionGuards:
    @pytest.mark.asyncio
    async def test_placeholder_session_secret_without_jwks(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.delenv("AUTH__JWKS_URL", raising=False)
        monkeypatch.delenv("AUTH__SESSION_SECRET", raising=False)
        container = build_test_container()

        try:
            with pytest.raises(ConfigurationError) as exc_info:
                await container.get(SessionService)
        finally:
            await container.close()

        assert exc_info.value.setting == "AUTH__JWKS_URL"

    @pytest.mark.asyncio
    async def test_configured_session_secret_accepted(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.delenv("AUTH__JWKS_URL", raising=False)
        monkeypatch.setenv("AUTH__SESSION_SECRET", "a-real-secret-of-decent-length")
        container = build_test_container()

        try:
            service = await container.get(SessionService)
        finally:
            await container.close()

        assert isinstance(service, SessionService)

    @pytest.mark.asyncio
    async def test_placeholder_clerk_key(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.delenv("AUTH__CLERK_SECRET_KEY", raising=False)
        container = build_test_container(unmock={"identity"})

        try:
            with pytest.raises(ConfigurationError) as exc_info:
                await container.get(IdentityProviderClient)
        finally:
            await container.close()

        assert exc_info.value.setting == "AUTH__CLERK_SECRET_KEY"

    @pytest.mark.asyncio
    async def test_development_uses_placeholder_clerk_key(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "development")
        container = build_test_container(unmock={"identity"})

        try:
            client = await container.get(IdentityProviderClient)
        finally:
            await container.close()

        assert isinstance(client, RealClerkClient)
