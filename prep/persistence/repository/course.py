"""PostgreSQL implementation of Course repository."""

from typing import Optional

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from prep.domain.model import Course
from prep.domain.repository import CourseRepository
from prep.domain.value import CourseId, UserId
from prep.persistence.mappers import course_to_dict, row_to_course
from prep.persistence.tables import courses_table


class PostgresCourseRepository(CourseRepository):
    """PostgreSQL implementation of CourseRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, course_id: CourseId) -> Optional[Course]:
        """Find a course by ID."""
        stmt = select(courses_table).where(courses_table.c.id == course_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_course(dict(row)) if row else None

    async def find_visible_to(self, user_id: UserId | None) -> list[Course]:
        """Find default courses plus the user's own courses.

        Args:
            user_id: Owner whose courses to include, None for defaults only

        Returns:
            Default courses first, then oldest first
        """
        condition = courses_table.c.is_default.is_(True)
        if user_id is not None:
            condition = or_(condition, courses_table.c.user_id == user_id)

        stmt = (
            select(courses_table)
            .where(condition)
            .order_by(courses_table.c.is_default.desc(), courses_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_course(dict(row)) for row in result.mappings().all()]

    async def find_defaults(self) -> list[Course]:
        """Find the default courses, oldest first."""
        stmt = (
            select(courses_table)
            .where(courses_table.c.is_default.is_(True))
            .order_by(courses_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_course(dict(row)) for row in result.mappings().all()]

    async def find_owned_by(self, user_id: UserId) -> list[Course]:
        """Find the user's own courses, newest first."""
        stmt = (
            select(courses_table)
            .where(courses_table.c.user_id == user_id)
            .where(courses_table.c.is_default.is_(False))
            .order_by(courses_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_course(dict(row)) for row in result.mappings().all()]

    async def count_owned_by(self, user_id: UserId) -> int:
        """Count the user's own courses."""
        stmt = (
            select(func.count())
            .select_from(courses_table)
            .where(courses_table.c.user_id == user_id)
            .where(courses_table.c.is_default.is_(False))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, course: Course) -> Course:
        """Save a course (create or update).

        Args:
            course: Course to save

        Returns:
            Saved course
        """
        existing = await self.find_by_id(course.id)

        course_dict = course_to_dict(course)

        if existing:
            stmt = (
                courses_table.update()
                .where(courses_table.c.id == course.id)
                .values(**course_dict)
            )
        else:
            stmt = courses_table.insert().values(**course_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return course

    async def delete(self, course_id: CourseId) -> None:
        """Delete a course; question links cascade."""
        stmt = courses_table.delete().where(courses_table.c.id == course_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_question_count(self, course_id: CourseId) -> None:
        """Atomically increment course's question count by 1."""
        stmt = (
            courses_table.update()
            .where(courses_table.c.id == course_id)
            .values(question_count=courses_table.c.question_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def decrement_question_count(self, course_id: CourseId) -> None:
        """Atomically decrement course's question count by 1 (minimum 0)."""
        stmt = (
            courses_table.update()
            .where(courses_table.c.id == course_id)
            .values(
                question_count=func.greatest(courses_table.c.question_count - 1, 0)
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
