"""PostgreSQL implementation of Question repository."""

from collections import defaultdict
from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from prep.domain.model import Question
from prep.domain.repository import QuestionRepository
from prep.domain.value import CourseId, QuestionId
from prep.persistence.mappers import question_to_dict, row_to_question
from prep.persistence.tables import course_questions_table, questions_table


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID, with its course ids."""
        stmt = select(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        links = await self._course_ids_for([question_id])
        return row_to_question(dict(row), links.get(question_id, []))

    async def find_all(self) -> list[Question]:
        """Find all questions, oldest first."""
        stmt = select(questions_table).order_by(questions_table.c.created_at)
        result = await self.session.execute(stmt)
        return await self._with_course_ids(result.mappings().all())

    async def find_by_course_ids(
        self, course_ids: Sequence[CourseId]
    ) -> list[Question]:
        """Find questions linked to any of the given courses in one query.

        Args:
            course_ids: Course ids to match

        Returns:
            Distinct questions, oldest first
        """
        if not course_ids:
            return []

        linked = select(course_questions_table.c.question_id).where(
            course_questions_table.c.course_id.in_(course_ids)
        )
        stmt = (
            select(questions_table)
            .where(questions_table.c.id.in_(linked))
            .order_by(questions_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return await self._with_course_ids(result.mappings().all())

    async def save(self, question: Question) -> Question:
        """Create a question and link it to its courses.

        Args:
            question: Question to save

        Returns:
            Saved question
        """
        stmt = insert(questions_table).values(**question_to_dict(question))
        await self.session.execute(stmt)

        if question.course_ids:
            links = insert(course_questions_table).values(
                [
                    {"course_id": course_id, "question_id": question.id}
                    for course_id in question.course_ids
                ]
            )
            await self.session.execute(links.on_conflict_do_nothing())

        await self.session.flush()
        return question

    async def update(self, question: Question) -> Question:
        """Update a question row. Course links are left alone."""
        values = question_to_dict(question)
        values.pop("id")
        values.pop("created_at")
        stmt = (
            questions_table.update()
            .where(questions_table.c.id == question.id)
            .values(**values)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return question

    async def unlink_course(self, question_id: QuestionId, course_id: CourseId) -> None:
        """Remove the link between a question and a course."""
        stmt = (
            course_questions_table.delete()
            .where(course_questions_table.c.question_id == question_id)
            .where(course_questions_table.c.course_id == course_id)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete(self, question_id: QuestionId) -> None:
        """Delete a question; links and solved marks cascade."""
        stmt = questions_table.delete().where(questions_table.c.id == question_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def _course_ids_for(
        self, question_ids: Sequence[UUID]
    ) -> dict[UUID, list[UUID]]:
        """Batch-load course links for the given questions."""
        if not question_ids:
            return {}

        stmt = (
            select(
                course_questions_table.c.question_id,
                course_questions_table.c.course_id,
            )
            .where(course_questions_table.c.question_id.in_(question_ids))
            .order_by(course_questions_table.c.created_at)
        )
        result = await self.session.execute(stmt)

        links: dict[UUID, list[UUID]] = defaultdict(list)
        for question_id, course_id in result.all():
            links[question_id].append(course_id)
        return links

    async def _with_course_ids(self, rows) -> list[Question]:
        links = await self._course_ids_for([row["id"] for row in rows])
        return [row_to_question(dict(row), links.get(row["id"], [])) for row in rows]
