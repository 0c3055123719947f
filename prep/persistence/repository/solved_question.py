"""PostgreSQL implementation of SolvedQuestion repository."""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from prep.domain.model import SolvedQuestion
from prep.domain.repository import SolvedQuestionRepository
from prep.domain.value import CourseId, QuestionId, UserId
from prep.persistence.mappers import row_to_solved_question
from prep.persistence.tables import course_questions_table, solved_questions_table


class PostgresSolvedQuestionRepository(SolvedQuestionRepository):
    """PostgreSQL implementation of SolvedQuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def upsert(
        self, user_id: UserId, question_id: QuestionId, solved_at: datetime
    ) -> SolvedQuestion:
        """Mark a question solved, refreshing solved_at on conflict.

        Args:
            user_id: User ID
            question_id: Question ID
            solved_at: Solve timestamp

        Returns:
            The stored solved mark
        """
        stmt = insert(solved_questions_table).values(
            id=uuid4(),
            user_id=user_id,
            question_id=question_id,
            solved_at=solved_at,
        )
        stmt = stmt.on_conflict_do_update(
            constraint="uq_solved_user_question",
            set_={"solved_at": stmt.excluded.solved_at},
        ).returning(*solved_questions_table.c)

        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_solved_question(dict(row))

    async def delete(self, user_id: UserId, question_id: QuestionId) -> bool:
        """Remove a solved mark.

        Returns:
            True if a row was deleted
        """
        stmt = (
            solved_questions_table.delete()
            .where(solved_questions_table.c.user_id == user_id)
            .where(solved_questions_table.c.question_id == question_id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def find_by_user(
        self, user_id: UserId, course_id: CourseId | None = None
    ) -> list[SolvedQuestion]:
        """Find a user's solved marks, newest first.

        Args:
            user_id: User ID
            course_id: Only include questions linked to this course
        """
        stmt = select(solved_questions_table).where(
            solved_questions_table.c.user_id == user_id
        )
        if course_id is not None:
            in_course = select(course_questions_table.c.question_id).where(
                course_questions_table.c.course_id == course_id
            )
            stmt = stmt.where(solved_questions_table.c.question_id.in_(in_course))
        stmt = stmt.order_by(solved_questions_table.c.solved_at.desc())

        result = await self.session.execute(stmt)
        return [row_to_solved_question(dict(row)) for row in result.mappings().all()]

    async def find_question_ids_by_user(self, user_id: UserId) -> set[QuestionId]:
        """Find the ids of all questions the user has solved."""
        stmt = select(solved_questions_table.c.question_id).where(
            solved_questions_table.c.user_id == user_id
        )
        result = await self.session.execute(stmt)
        return {QuestionId(qid) for qid in result.scalars().all()}
