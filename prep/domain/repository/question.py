"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from prep.domain.model.question import Question
from prep.domain.value import CourseId, QuestionId


class QuestionRepository(ABC):
    """Repository for Question entity and its course links."""

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID, with its course ids."""
        pass

    @abstractmethod
    async def find_all(self) -> list[Question]:
        """Find all questions, oldest first."""
        pass

    @abstractmethod
    async def find_by_course_ids(
        self, course_ids: Sequence[CourseId]
    ) -> list[Question]:
        """Find questions linked to any of the given courses (batch query).

        Returns:
            Distinct questions, oldest first
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Create a question and link it to question.course_ids."""
        pass

    @abstractmethod
    async def update(self, question: Question) -> Question:
        """Update a question's own fields. Course links are left alone."""
        pass

    @abstractmethod
    async def unlink_course(self, question_id: QuestionId, course_id: CourseId) -> None:
        """Remove the link between a question and a course."""
        pass

    @abstractmethod
    async def delete(self, question_id: QuestionId) -> None:
        """Delete a question and all of its links."""
        pass
