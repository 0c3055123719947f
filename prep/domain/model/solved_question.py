"""Solved question entity."""

from datetime import datetime

from pydantic import Field

from prep.domain.model.common import DomainModel, utc_now
from prep.domain.value import QuestionId, SolvedQuestionId, UserId


class SolvedQuestion(DomainModel):
    """Record that a user solved a question.

    Unique per (user_id, question_id); solving again refreshes solved_at.
    """

    id: SolvedQuestionId
    user_id: UserId
    question_id: QuestionId
    solved_at: datetime = Field(default_factory=utc_now)
