"""Unit tests for SolvedQuestionService and streak calculation."""

from datetime import date, datetime, timezone
from uuid import uuid4

import pytest

from prep.domain.service import SolvedQuestionService, calculate_streak
from prep.domain.value import QuestionId, UserId
from prep.persistence.repository.inmemory import InMemorySolvedQuestionRepository


def at(day: int, hour: int = 12) -> datetime:
    return datetime(2024, 3, day, hour, tzinfo=timezone.utc)


class TestCalculateStreak:
    """Tests for calculate_streak()."""

    def test_no_solves_is_zero(self):
        """Should be 0 without solves."""
        assert calculate_streak([], date(2024, 3, 10)) == 0

    def test_counts_consecutive_days_ending_today(self):
        """Should count each consecutive day once."""
        solved = [at(10, 9), at(10, 18), at(9), at(8)]

        assert calculate_streak(solved, date(2024, 3, 10)) == 3

    def test_gap_breaks_streak(self):
        """Should stop counting at the first day without a solve."""
        solved = [at(10), at(8), at(7)]

        assert calculate_streak(solved, date(2024, 3, 10)) == 1

    def test_nothing_today_is_zero(self):
        """Should be 0 when nothing was solved today."""
        solved = [at(9), at(8)]

        assert calculate_streak(solved, date(2024, 3, 10)) == 0


class TestSolvedQuestionService:
    """Tests for SolvedQuestionService."""

    @pytest.mark.asyncio
    async def test_mark_solved_twice_keeps_one_mark(self):
        """Marking again should refresh the existing mark."""
        # Arrange
        service = SolvedQuestionService(InMemorySolvedQuestionRepository())
        user_id = UserId(uuid4())
        question_id = QuestionId(uuid4())

        # Act
        first = await service.mark_solved(user_id, question_id)
        second = await service.mark_solved(user_id, question_id)

        # Assert
        assert first.id == second.id
        assert second.solved_at >= first.solved_at
        assert len(await service.list_solved(user_id)) == 1

    @pytest.mark.asyncio
    async def test_unmark_reports_whether_mark_existed(self):
        """Should return False when there was nothing to remove."""
        # Arrange
        service = SolvedQuestionService(InMemorySolvedQuestionRepository())
        user_id = UserId(uuid4())
        question_id = QuestionId(uuid4())
        await service.mark_solved(user_id, question_id)

        # Act / Assert
        assert await service.unmark_solved(user_id, question_id) is True
        assert await service.unmark_solved(user_id, question_id) is False

    @pytest.mark.asyncio
    async def test_anonymous_caller_has_no_solved_ids(self):
        """Should return an empty set for anonymous callers."""
        service = SolvedQuestionService(InMemorySolvedQuestionRepository())

        assert await service.solved_question_ids(None) == set()
