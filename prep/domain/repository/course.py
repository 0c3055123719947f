"""Course repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from prep.domain.model.course import Course
from prep.domain.value import CourseId, UserId


class CourseRepository(ABC):
    """Repository for Course entity."""

    @abstractmethod
    async def find_by_id(self, course_id: CourseId) -> Optional[Course]:
        """Find a course by ID."""
        pass

    @abstractmethod
    async def find_visible_to(self, user_id: UserId | None) -> list[Course]:
        """Find default courses plus the user's own courses.

        Args:
            user_id: Owner whose courses to include, None for defaults only

        Returns:
            Courses, default courses first, then oldest first
        """
        pass

    @abstractmethod
    async def find_defaults(self) -> list[Course]:
        """Find the shared default courses, oldest first."""
        pass

    @abstractmethod
    async def find_owned_by(self, user_id: UserId) -> list[Course]:
        """Find the user's own (non-default) courses, newest first."""
        pass

    @abstractmethod
    async def count_owned_by(self, user_id: UserId) -> int:
        """Count the user's own (non-default) courses."""
        pass

    @abstractmethod
    async def save(self, course: Course) -> Course:
        """Save a course (create or update)."""
        pass

    @abstractmethod
    async def delete(self, course_id: CourseId) -> None:
        """Delete a course and its question links."""
        pass

    @abstractmethod
    async def increment_question_count(self, course_id: CourseId) -> None:
        """Atomically increment the course's question count by 1."""
        pass

    @abstractmethod
    async def decrement_question_count(self, course_id: CourseId) -> None:
        """Atomically decrement the course's question count by 1 (minimum 0)."""
        pass
