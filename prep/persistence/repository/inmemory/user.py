"""In-memory user repository for testing."""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from prep.domain.model.user import User
from prep.domain.repository.user import UserRepository
from prep.domain.value import ExternalIdentity, QuestionId, UserId
from prep.domain.value.types import ExternalId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _users(self) -> dict[UserId, User]:
        return self._store.users

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_external_id(self, external_id: ExternalId) -> Optional[User]:
        """Find a user by their identity provider id."""
        for user in self._users.values():
            if user.external_id == external_id:
                return user
        return None

    async def upsert_identity(self, identity: ExternalIdentity) -> User:
        """Create or refresh a user under the store lock.

        The lookup and the write happen in one critical section, so
        concurrent calls for one identity never create two users.
        """
        async with self._store.lock:
            existing = await self.find_by_external_id(identity.external_id)
            now = datetime.now(timezone.utc)

            if existing is None:
                user = User(
                    id=UserId(uuid4()),
                    external_id=identity.external_id,
                    email=identity.email,
                    name=identity.display_name,
                    created_at=now,
                    updated_at=now,
                )
            elif existing.differs_from(identity):
                user = existing.model_copy(
                    update={
                        "email": identity.email,
                        "name": identity.display_name,
                        "updated_at": now,
                    }
                )
            else:
                return existing

            self._users[user.id] = user
            return user

    async def add_bookmark(
        self, user_id: UserId, question_id: QuestionId
    ) -> list[QuestionId]:
        """Append a bookmark unless already present."""
        user = self._users.get(user_id)
        if user is None:
            return []
        if question_id not in user.bookmarked_question_ids:
            user = user.model_copy(
                update={
                    "bookmarked_question_ids": [
                        *user.bookmarked_question_ids,
                        question_id,
                    ]
                }
            )
            self._users[user_id] = user
        return list(user.bookmarked_question_ids)

    async def remove_bookmark(
        self, user_id: UserId, question_id: QuestionId
    ) -> list[QuestionId]:
        """Remove a bookmark (no-op when absent)."""
        user = self._users.get(user_id)
        if user is None:
            return []
        user = user.model_copy(
            update={
                "bookmarked_question_ids": [
                    qid for qid in user.bookmarked_question_ids if qid != question_id
                ]
            }
        )
        self._users[user_id] = user
        return list(user.bookmarked_question_ids)

    async def increment_courses_created(self, user_id: UserId) -> None:
        """Atomically increment user's created-courses counter by 1."""
        user = self._users.get(user_id)
        if user:
            self._users[user_id] = user.model_copy(
                update={"total_courses_created": user.total_courses_created + 1}
            )

    async def decrement_courses_created(self, user_id: UserId) -> None:
        """Atomically decrement user's created-courses counter (minimum 0)."""
        user = self._users.get(user_id)
        if user:
            self._users[user_id] = user.model_copy(
                update={
                    "total_courses_created": max(0, user.total_courses_created - 1)
                }
            )
