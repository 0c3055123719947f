"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from prep.domain.model.user import User
from prep.domain.value import ExternalIdentity, QuestionId, UserId
from prep.domain.value.types import ExternalId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_external_id(self, external_id: ExternalId) -> Optional[User]:
        """Find a user by their identity provider id.

        Args:
            external_id: The user's id at the identity provider

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def upsert_identity(self, identity: ExternalIdentity) -> User:
        """Create or refresh the user mirrored from an identity snapshot.

        Must be a single atomic operation keyed by external id: concurrent
        calls for the same identity never create two users. Existing users
        keep their primary key; email and name are overwritten with the
        snapshot, and updated_at only moves when one of them changed.

        Args:
            identity: Profile snapshot from the identity provider

        Returns:
            The stored user
        """
        pass

    @abstractmethod
    async def add_bookmark(
        self, user_id: UserId, question_id: QuestionId
    ) -> list[QuestionId]:
        """Atomically append a bookmark if it is not already present.

        Args:
            user_id: The user's unique identifier
            question_id: Question to bookmark

        Returns:
            The user's bookmarks after the change
        """
        pass

    @abstractmethod
    async def remove_bookmark(
        self, user_id: UserId, question_id: QuestionId
    ) -> list[QuestionId]:
        """Atomically remove a bookmark (no-op when absent).

        Args:
            user_id: The user's unique identifier
            question_id: Question to remove

        Returns:
            The user's bookmarks after the change
        """
        pass

    @abstractmethod
    async def increment_courses_created(self, user_id: UserId) -> None:
        """Atomically increment the user's created-courses counter."""
        pass

    @abstractmethod
    async def decrement_courses_created(self, user_id: UserId) -> None:
        """Atomically decrement the user's created-courses counter (minimum 0)."""
        pass
