"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from prep.domain.repository.course import CourseRepository
from prep.domain.repository.question import QuestionRepository
from prep.domain.repository.solved_question import SolvedQuestionRepository
from prep.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "CourseRepository",
    "QuestionRepository",
    "SolvedQuestionRepository",
]
