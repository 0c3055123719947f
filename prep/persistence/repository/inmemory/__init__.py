"""In-memory repository implementations for testing."""

from .course import InMemoryCourseRepository
from .question import InMemoryQuestionRepository
from .solved_question import InMemorySolvedQuestionRepository
from .store import InMemoryStore
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCourseRepository",
    "InMemoryQuestionRepository",
    "InMemorySolvedQuestionRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
]
