"""Identity provider infrastructure providers."""

from dishka import Scope, provide

from prep.adapter.clerk.client import RealClerkClient
from prep.config import PLACEHOLDER_SECRET, Settings
from prep.domain.service import IdentityProviderClient
from prep.util.di.base import ProviderBase
from prep.util.error import ConfigurationError


class IdentityProvider(ProviderBase):
    """Identity provider component base."""

    __mock_component__ = "identity"


class ProdIdentityProvider(IdentityProvider):
    """Production identity provider backed by the Clerk Backend API."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_identity_client(self, settings: Settings) -> IdentityProviderClient:
        """Provide Clerk client.

        Returns:
            Clerk Backend API client

        Raises:
            ConfigurationError: If the Clerk secret key is not configured
        """
        if (
            settings.environment == "production"
            and settings.auth.clerk_secret_key == PLACEHOLDER_SECRET
        ):
            raise ConfigurationError("AUTH__CLERK_SECRET_KEY")

        return RealClerkClient(
            secret_key=settings.auth.clerk_secret_key,
            api_url=settings.auth.clerk_api_url,
        )
