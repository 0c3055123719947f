"""PostgreSQL implementation of User repository."""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from sqlalchemy import any_, case, func, or_, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from prep.domain.model import User
from prep.domain.repository import UserRepository
from prep.domain.value import ExternalIdentity, QuestionId, UserId
from prep.domain.value.types import ExternalId
from prep.persistence.mappers import row_to_user
from prep.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_external_id(self, external_id: ExternalId) -> Optional[User]:
        """Find a user by their identity provider id.

        Args:
            external_id: Identity provider user id

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(
            users_table.c.external_id == external_id.root
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def upsert_identity(self, identity: ExternalIdentity) -> User:
        """Create or refresh a user in a single INSERT ... ON CONFLICT.

        The unique constraint on external_id serialises concurrent syncs
        for the same identity. The conflict branch always fires so that
        RETURNING yields the row, but updated_at only moves when the
        email or name actually changed.

        Args:
            identity: Profile snapshot from the identity provider

        Returns:
            The stored user
        """
        now = datetime.now(timezone.utc)
        stmt = insert(users_table).values(
            id=uuid4(),
            external_id=identity.external_id.root,
            email=identity.email,
            name=identity.display_name,
            created_at=now,
            updated_at=now,
        )
        changed = or_(
            users_table.c.email.is_distinct_from(stmt.excluded.email),
            users_table.c.name.is_distinct_from(stmt.excluded.name),
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.external_id],
            set_={
                "email": stmt.excluded.email,
                "name": stmt.excluded.name,
                "updated_at": case(
                    (changed, stmt.excluded.updated_at),
                    else_=users_table.c.updated_at,
                ),
            },
        ).returning(*users_table.c)

        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_user(dict(row))

    async def add_bookmark(
        self, user_id: UserId, question_id: QuestionId
    ) -> list[QuestionId]:
        """Append a bookmark unless it is already in the array.

        Args:
            user_id: User ID to update
            question_id: Question to bookmark

        Returns:
            Bookmarks after the change
        """
        bookmarks = users_table.c.bookmarked_question_ids
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .where(~(any_(bookmarks) == question_id))
            .values(bookmarked_question_ids=func.array_append(bookmarks, question_id))
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return await self._bookmarks(user_id)

    async def remove_bookmark(
        self, user_id: UserId, question_id: QuestionId
    ) -> list[QuestionId]:
        """Remove a bookmark from the array.

        Args:
            user_id: User ID to update
            question_id: Question to remove

        Returns:
            Bookmarks after the change
        """
        bookmarks = users_table.c.bookmarked_question_ids
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(bookmarked_question_ids=func.array_remove(bookmarks, question_id))
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return await self._bookmarks(user_id)

    async def increment_courses_created(self, user_id: UserId) -> None:
        """Atomically increment user's created-courses counter by 1.

        Args:
            user_id: User ID to update
        """
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(total_courses_created=users_table.c.total_courses_created + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def decrement_courses_created(self, user_id: UserId) -> None:
        """Atomically decrement user's created-courses counter (minimum 0).

        Args:
            user_id: User ID to update
        """
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(
                total_courses_created=func.greatest(
                    users_table.c.total_courses_created - 1, 0
                )
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def _bookmarks(self, user_id: UserId) -> list[QuestionId]:
        stmt = select(users_table.c.bookmarked_question_ids).where(
            users_table.c.id == user_id
        )
        result = await self.session.execute(stmt)
        ids = result.scalar_one_or_none() or []
        return [QuestionId(qid) for qid in ids]
