"""Sync user use case."""

from pydantic import BaseModel

from prep.application.usecase.caller import CallerResolver
from prep.application.usecase.dto import UserInfo
from prep.domain.service import IdentityService, UserService


class SyncUserRequest(BaseModel):
    """Sync user request."""

    token: str | None  # Session token from header or cookie


class SyncUserResponse(BaseModel):
    """Sync user response.

    The message is informative only. It does not say whether the record
    was created or refreshed.
    """

    message: str
    user: UserInfo


class SyncUserUseCase:
    """Use case for mirroring the signed-in identity into a local user."""

    def __init__(
        self,
        caller_resolver: CallerResolver,
        identity_service: IdentityService,
        user_service: UserService,
    ) -> None:
        """Initialize sync user use case.

        Args:
            caller_resolver: Session token resolver
            identity_service: Identity provider domain service
            user_service: User domain service
        """
        self.caller_resolver = caller_resolver
        self.identity_service = identity_service
        self.user_service = user_service

    async def execute(self, request: SyncUserRequest) -> SyncUserResponse:
        """Execute sync user flow.

        Steps:
        1. Resolve the caller's external id from the session token
        2. Fetch the current profile snapshot from the identity provider
        3. Upsert the local user keyed by external id

        Safe to call any number of times, concurrently or not.

        Args:
            request: Request with session token

        Returns:
            The stored user

        Raises:
            UnauthenticatedError: If the token is missing or invalid
            IdentityNotFoundError: If the provider does not know the caller
            ProviderError: If the provider cannot be reached
        """
        external_id = await self.caller_resolver.require_external_id(request.token)

        identity = await self.identity_service.get_identity(external_id)

        user = await self.user_service.sync_identity(identity)

        return SyncUserResponse(
            message="User synced successfully",
            user=UserInfo.from_user(user),
        )
