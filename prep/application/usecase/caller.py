"""Resolve the caller of a use case from their session token."""

from prep.domain.error import UnauthenticatedError
from prep.domain.model import User
from prep.domain.service import SessionService, UserService
from prep.domain.value.types import ExternalId


class CallerResolver:
    """Maps a session token onto the caller's external id and local user."""

    def __init__(
        self, session_service: SessionService, user_service: UserService
    ) -> None:
        """Initialize caller resolver.

        Args:
            session_service: Session token domain service
            user_service: User domain service
        """
        self.session_service = session_service
        self.user_service = user_service

    async def require_external_id(self, token: str | None) -> ExternalId:
        """External id of the caller.

        Raises:
            UnauthenticatedError: If the token is missing or invalid
        """
        external_id = await self.session_service.get_external_id_from_token(token)
        if external_id is None:
            raise UnauthenticatedError("Authentication required")
        return external_id

    async def require_user(self, token: str | None) -> User:
        """Local user record of the caller.

        Raises:
            UnauthenticatedError: If the token is missing or invalid
            NotFoundError: If the caller was never synced
        """
        external_id = await self.require_external_id(token)
        return await self.user_service.get_by_external_id(external_id)

    async def find_user(self, token: str | None) -> User | None:
        """Local user record of the caller, None for anonymous or unsynced callers."""
        external_id = await self.session_service.get_external_id_from_token(token)
        if external_id is None:
            return None
        return await self.user_service.find_by_external_id(external_id)
