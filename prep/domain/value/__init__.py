"""Domain value objects."""

from prep.domain.value.identifiers import (
    CourseId,
    QuestionId,
    SolvedQuestionId,
    UserId,
)
from prep.domain.value.types import (
    Difficulty,
    ExternalId,
    ExternalIdentity,
    ParsedQuestion,
)

__all__ = [
    # Identifiers
    "UserId",
    "CourseId",
    "QuestionId",
    "SolvedQuestionId",
    # Types
    "Difficulty",
    "ExternalId",
    "ExternalIdentity",
    "ParsedQuestion",
]
