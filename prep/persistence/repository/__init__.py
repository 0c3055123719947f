"""PostgreSQL repository implementations."""

from prep.persistence.repository.course import PostgresCourseRepository
from prep.persistence.repository.question import PostgresQuestionRepository
from prep.persistence.repository.solved_question import (
    PostgresSolvedQuestionRepository,
)
from prep.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresCourseRepository",
    "PostgresQuestionRepository",
    "PostgresSolvedQuestionRepository",
]
