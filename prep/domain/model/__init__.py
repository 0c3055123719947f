"""Domain model entities."""

from prep.domain.model.course import Course
from prep.domain.model.question import Question
from prep.domain.model.solved_question import SolvedQuestion
from prep.domain.model.user import User

__all__ = [
    "User",
    "Course",
    "Question",
    "SolvedQuestion",
]
