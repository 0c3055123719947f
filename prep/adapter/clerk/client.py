"""Clerk Backend API client.

Reads user profiles for signed-in identities. The API never writes to Clerk.
"""

import httpx
import logfire

from prep.adapter.error import IdentityNotFoundError, ProviderError
from prep.domain.service.identity_service import IdentityProviderClient
from prep.domain.value import ExternalIdentity
from prep.domain.value.types import ExternalId


class ClerkClient(IdentityProviderClient):
    """Base class for Clerk clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealClerkClient(ClerkClient):
    """Clerk Backend API client using a secret key."""

    def __init__(self, secret_key: str, api_url: str, timeout: float = 10.0) -> None:
        """Initialize Clerk client.

        Args:
            secret_key: Clerk secret key (sk_live_... / sk_test_...)
            api_url: Clerk Backend API base URL
            timeout: Request timeout in seconds
        """
        self.secret_key = secret_key
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout

    async def get_identity(self, external_id: ExternalId) -> ExternalIdentity:
        """Fetch a user profile from Clerk.

        Args:
            external_id: Clerk user id

        Returns:
            Profile snapshot

        Raises:
            IdentityNotFoundError: If Clerk has no such user
            ProviderError: If the request fails
        """
        url = f"{self.api_url}/users/{external_id.root}"

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    url,
                    headers={"Authorization": f"Bearer {self.secret_key}"},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Clerk user request HTTP error", error=str(e))
            raise ProviderError(f"HTTP error fetching Clerk user: {e}") from e

        if response.status_code == 404:
            raise IdentityNotFoundError(external_id.root)

        if response.status_code != 200:
            logfire.error(
                "Clerk user request failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise ProviderError(f"Clerk user request failed: {response.status_code}")

        return self._to_identity(external_id, response.json())

    @staticmethod
    def _to_identity(external_id: ExternalId, data: dict) -> ExternalIdentity:
        """Map a Clerk user object onto an identity snapshot.

        The primary email address wins; otherwise the first listed one.
        """
        addresses = data.get("email_addresses") or []
        primary_id = data.get("primary_email_address_id")
        email = None
        for address in addresses:
            if address.get("id") == primary_id:
                email = address.get("email_address")
                break
        if email is None and addresses:
            email = addresses[0].get("email_address")

        return ExternalIdentity(
            external_id=external_id,
            email=email,
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
        )


class MockClerkClient(ClerkClient):
    """In-memory Clerk client for testing.

    Unknown ids resolve to a deterministic profile unless they were removed
    with forget().
    """

    def __init__(self) -> None:
        """Initialize mock client with no registered identities."""
        self._identities: dict[str, ExternalIdentity] = {}
        self._forgotten: set[str] = set()
        self.fail_with: Exception | None = None
        self.calls: list[str] = []

    def register(
        self,
        external_id: str,
        email: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> ExternalIdentity:
        """Register or replace the profile returned for an id."""
        identity = ExternalIdentity(
            external_id=ExternalId(external_id),
            email=email,
            first_name=first_name,
            last_name=last_name,
        )
        self._identities[identity.external_id.root] = identity
        self._forgotten.discard(identity.external_id.root)
        return identity

    def forget(self, external_id: str) -> None:
        """Make the provider report the id as unknown."""
        self._identities.pop(external_id, None)
        self._forgotten.add(external_id)

    async def get_identity(self, external_id: ExternalId) -> ExternalIdentity:
        """Return the registered profile, or a generated one."""
        self.calls.append(external_id.root)

        if self.fail_with is not None:
            raise self.fail_with
        if external_id.root in self._forgotten:
            raise IdentityNotFoundError(external_id.root)

        identity = self._identities.get(external_id.root)
        if identity is None:
            identity = ExternalIdentity(
                external_id=external_id,
                email=f"{external_id.root}@example.com",
                first_name="Test",
                last_name="User",
            )
        return identity
