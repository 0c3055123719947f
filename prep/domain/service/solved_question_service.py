"""Solved question domain service."""

from datetime import date, datetime, timedelta, timezone
from typing import Iterable

import logfire

from prep.domain.model import SolvedQuestion
from prep.domain.repository import SolvedQuestionRepository
from prep.domain.value import CourseId, QuestionId, UserId


def calculate_streak(solved_dates: Iterable[datetime], today: date) -> int:
    """Count consecutive days ending today with at least one solve.

    A streak is 0 when nothing was solved today.
    """
    days = {solved_at.date() for solved_at in solved_dates}
    streak = 0
    day = today
    while day in days:
        streak += 1
        day -= timedelta(days=1)
    return streak


class SolvedQuestionService:
    """Domain service for solved question tracking."""

    def __init__(self, solved_question_repository: SolvedQuestionRepository) -> None:
        """Initialize solved question service.

        Args:
            solved_question_repository: Solved question repository
        """
        self.solved_question_repository = solved_question_repository

    async def mark_solved(
        self, user_id: UserId, question_id: QuestionId
    ) -> SolvedQuestion:
        """Mark a question solved (refreshes solved_at when already marked)."""
        with logfire.span(
            "solved_question_service.mark_solved",
            user_id=str(user_id),
            question_id=str(question_id),
        ):
            solved = await self.solved_question_repository.upsert(
                user_id, question_id, datetime.now(timezone.utc)
            )
            logfire.info("Question marked solved", question_id=str(question_id))
            return solved

    async def unmark_solved(self, user_id: UserId, question_id: QuestionId) -> bool:
        """Remove a solved mark.

        Returns:
            True if a mark was removed
        """
        with logfire.span(
            "solved_question_service.unmark_solved",
            user_id=str(user_id),
            question_id=str(question_id),
        ):
            removed = await self.solved_question_repository.delete(
                user_id, question_id
            )
            logfire.info(
                "Question unmarked", question_id=str(question_id), removed=removed
            )
            return removed

    async def list_solved(
        self, user_id: UserId, course_id: CourseId | None = None
    ) -> list[SolvedQuestion]:
        """List a user's solved marks, newest first."""
        return await self.solved_question_repository.find_by_user(user_id, course_id)

    async def solved_question_ids(self, user_id: UserId | None) -> set[QuestionId]:
        """Ids of the questions a user solved (empty for anonymous callers)."""
        if user_id is None:
            return set()
        return await self.solved_question_repository.find_question_ids_by_user(
            user_id
        )
