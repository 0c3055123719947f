"""User domain service."""

import logfire

from prep.domain.error import NotFoundError
from prep.domain.model import User
from prep.domain.repository import UserRepository
from prep.domain.value import ExternalIdentity, QuestionId, UserId
from prep.domain.value.types import ExternalId


class UserService:
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def find_by_external_id(self, external_id: ExternalId) -> User | None:
        """Get user by identity provider id.

        Args:
            external_id: Identity provider user id

        Returns:
            User if already synced, None otherwise
        """
        with logfire.span(
            "user_service.find_by_external_id", external_id=external_id.root
        ):
            user = await self.user_repository.find_by_external_id(external_id)
            if not user:
                logfire.info("User not synced yet", external_id=external_id.root)
            return user

    async def get_by_external_id(self, external_id: ExternalId) -> User:
        """Get user by identity provider id.

        Raises:
            NotFoundError: If the identity has never been synced
        """
        user = await self.find_by_external_id(external_id)
        if not user:
            raise NotFoundError("User", external_id.root)
        return user

    async def sync_identity(self, identity: ExternalIdentity) -> User:
        """Mirror an identity snapshot into the local user record.

        Idempotent: applying the same snapshot N times leaves the same
        record as applying it once.

        Args:
            identity: Profile snapshot from the identity provider

        Returns:
            The created or refreshed user
        """
        with logfire.span(
            "user_service.sync_identity", external_id=identity.external_id.root
        ):
            user = await self.user_repository.upsert_identity(identity)
            logfire.info(
                "User synced",
                external_id=identity.external_id.root,
                user_id=str(user.id),
            )
            return user

    async def add_bookmark(
        self, user_id: UserId, question_id: QuestionId
    ) -> list[QuestionId]:
        """Bookmark a question (no-op when already bookmarked).

        Args:
            user_id: User ID
            question_id: Question ID

        Returns:
            Bookmarked question ids after the change
        """
        with logfire.span(
            "user_service.add_bookmark",
            user_id=str(user_id),
            question_id=str(question_id),
        ):
            bookmarks = await self.user_repository.add_bookmark(user_id, question_id)
            logfire.info("Bookmark added", user_id=str(user_id), count=len(bookmarks))
            return bookmarks

    async def remove_bookmark(
        self, user_id: UserId, question_id: QuestionId
    ) -> list[QuestionId]:
        """Remove a bookmark (no-op when absent).

        Args:
            user_id: User ID
            question_id: Question ID

        Returns:
            Bookmarked question ids after the change
        """
        with logfire.span(
            "user_service.remove_bookmark",
            user_id=str(user_id),
            question_id=str(question_id),
        ):
            bookmarks = await self.user_repository.remove_bookmark(
                user_id, question_id
            )
            logfire.info(
                "Bookmark removed", user_id=str(user_id), count=len(bookmarks)
            )
            return bookmarks

    async def increment_courses_created(self, user_id: UserId) -> None:
        """Atomically increment the user's created-courses counter."""
        await self.user_repository.increment_courses_created(user_id)

    async def decrement_courses_created(self, user_id: UserId) -> None:
        """Atomically decrement the user's created-courses counter."""
        await self.user_repository.decrement_courses_created(user_id)
