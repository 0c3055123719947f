"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from prep.config import Settings
from prep.domain.repository import (
    CourseRepository,
    QuestionRepository,
    SolvedQuestionRepository,
    UserRepository,
)
from prep.persistence.database import create_engine, create_session_factory
from prep.persistence.repository import (
    PostgresCourseRepository,
    PostgresQuestionRepository,
    PostgresSolvedQuestionRepository,
    PostgresUserRepository,
)
from prep.util.di.base import ProviderBase
from prep.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide the traced database engine, disposed when the app stops."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide one transaction per request.

        Commits when the request finishes, rolls back if it raised.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                logfire.warn(
                    "Request transaction rolled back",
                    error_type=type(e).__name__,
                )
                raise
            await session.commit()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_course_repository(self, session: AsyncSession) -> CourseRepository:
        """Provide Course repository."""
        return PostgresCourseRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_question_repository(self, session: AsyncSession) -> QuestionRepository:
        """Provide Question repository."""
        return PostgresQuestionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_solved_question_repository(
        self, session: AsyncSession
    ) -> SolvedQuestionRepository:
        """Provide SolvedQuestion repository."""
        return PostgresSolvedQuestionRepository(session)
