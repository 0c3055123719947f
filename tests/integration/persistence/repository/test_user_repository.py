"""Integration tests for PostgresUserRepository.

These tests need PostgreSQL at DATABASE__URL with the schema from
scripts/init_db.py. Each test uses fresh external ids.
"""

import asyncio
from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from prep.domain.repository import UserRepository
from prep.domain.value import ExternalIdentity, QuestionId
from prep.domain.value.types import ExternalId
from prep.persistence.repository import PostgresUserRepository
from tests.harness import create_env_fixture

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})

pytestmark = pytest.mark.integration


def make_identity(external_id: str, email: str = "a@x.com") -> ExternalIdentity:
    return ExternalIdentity(
        external_id=ExternalId(external_id),
        email=email,
        first_name="Ann",
        last_name="Lee",
    )


class TestUpsertIdentity:
    """Integration tests for PostgresUserRepository.upsert_identity()."""

    @pytest.mark.asyncio
    async def test_upsert_creates_then_reuses_row(self, integration_env):
        """Repeated upserts should return the same row."""
        # Arrange
        repo = await integration_env.get(UserRepository)
        identity = make_identity(f"ext_{uuid4().hex}")

        # Act
        first = await repo.upsert_identity(identity)
        second = await repo.upsert_identity(identity)

        # Assert
        assert first.id == second.id
        assert second.updated_at == first.updated_at
        assert second.name == "Ann Lee"

    @pytest.mark.asyncio
    async def test_upsert_updates_changed_profile(self, integration_env):
        """A changed email should update the row and its updated_at."""
        # Arrange
        repo = await integration_env.get(UserRepository)
        external_id = f"ext_{uuid4().hex}"
        first = await repo.upsert_identity(make_identity(external_id))

        # Act
        second = await repo.upsert_identity(make_identity(external_id, "b@x.com"))

        # Assert
        assert second.id == first.id
        assert second.email == "b@x.com"
        assert second.created_at == first.created_at
        assert second.updated_at >= first.updated_at

    @pytest.mark.asyncio
    async def test_concurrent_upserts_create_one_row(self, integration_env):
        """Upserts racing on separate connections should converge on one row."""
        # Arrange
        session_factory = await integration_env.get(async_sessionmaker[AsyncSession])
        identity = make_identity(f"ext_{uuid4().hex}")

        async def upsert_in_own_session():
            async with session_factory() as session:
                user = await PostgresUserRepository(session).upsert_identity(identity)
                await session.commit()
                return user

        # Act
        users = await asyncio.gather(*(upsert_in_own_session() for _ in range(5)))

        # Assert
        assert len({user.id for user in users}) == 1
        repo = await integration_env.get(UserRepository)
        stored = await repo.find_by_external_id(identity.external_id)
        assert stored is not None
        assert stored.id == users[0].id


class TestBookmarks:
    """Integration tests for bookmark array updates."""

    @pytest.mark.asyncio
    async def test_add_bookmark_deduplicates(self, integration_env):
        """Adding the same bookmark twice should store it once."""
        # Arrange
        repo = await integration_env.get(UserRepository)
        user = await repo.upsert_identity(make_identity(f"ext_{uuid4().hex}"))
        question_id = QuestionId(uuid4())

        # Act
        await repo.add_bookmark(user.id, question_id)
        bookmarks = await repo.add_bookmark(user.id, question_id)

        # Assert
        assert bookmarks == [question_id]

        remaining = await repo.remove_bookmark(user.id, question_id)
        assert remaining == []
