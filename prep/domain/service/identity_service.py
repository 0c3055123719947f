"""Identity provider domain service."""

import logfire

from prep.domain.value import ExternalIdentity
from prep.domain.value.types import ExternalId


class IdentityProviderClient:
    """Read-only client for the hosted identity provider."""

    async def get_identity(self, external_id: ExternalId) -> ExternalIdentity:
        """Fetch the current profile snapshot for a signed-in person.

        Args:
            external_id: Identity provider user id

        Returns:
            Profile snapshot

        Raises:
            IdentityNotFoundError: If the provider has no such user
            ProviderError: If the provider cannot be reached
        """
        raise NotImplementedError


class IdentityService:
    """Domain service for reading identities from the provider."""

    def __init__(self, identity_client: IdentityProviderClient) -> None:
        """Initialize identity service.

        Args:
            identity_client: Identity provider client
        """
        self.identity_client = identity_client

    async def get_identity(self, external_id: ExternalId) -> ExternalIdentity:
        """Fetch an identity snapshot.

        Args:
            external_id: Identity provider user id

        Returns:
            Profile snapshot
        """
        with logfire.span(
            "identity_service.get_identity", external_id=external_id.root
        ):
            identity = await self.identity_client.get_identity(external_id)
            logfire.info(
                "Identity fetched",
                external_id=external_id.root,
                has_email=identity.email is not None,
            )
            return identity
