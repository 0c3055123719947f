"""Domain services."""

from .course_service import CourseService
from .identity_service import IdentityProviderClient, IdentityService
from .question_parser import QuestionParser, QuestionParserService, map_topics
from .question_service import QuestionService
from .session_service import SessionService
from .solved_question_service import SolvedQuestionService, calculate_streak
from .user_service import UserService

__all__ = [
    "CourseService",
    "IdentityProviderClient",
    "IdentityService",
    "QuestionParser",
    "QuestionParserService",
    "QuestionService",
    "SessionService",
    "SolvedQuestionService",
    "UserService",
    "calculate_streak",
    "map_topics",
]
