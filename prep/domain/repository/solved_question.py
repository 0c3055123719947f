"""Solved question repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from prep.domain.model.solved_question import SolvedQuestion
from prep.domain.value import CourseId, QuestionId, UserId


class SolvedQuestionRepository(ABC):
    """Repository for SolvedQuestion entity."""

    @abstractmethod
    async def upsert(
        self, user_id: UserId, question_id: QuestionId, solved_at: datetime
    ) -> SolvedQuestion:
        """Mark a question solved, refreshing solved_at if already marked.

        Atomic per (user_id, question_id).
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId, question_id: QuestionId) -> bool:
        """Remove a solved mark.

        Returns:
            True if a mark was removed, False if none existed
        """
        pass

    @abstractmethod
    async def find_by_user(
        self, user_id: UserId, course_id: CourseId | None = None
    ) -> list[SolvedQuestion]:
        """Find a user's solved marks, newest first.

        Args:
            user_id: The user's unique identifier
            course_id: Only include questions linked to this course
        """
        pass

    @abstractmethod
    async def find_question_ids_by_user(self, user_id: UserId) -> set[QuestionId]:
        """Find the ids of all questions the user has solved."""
        pass
