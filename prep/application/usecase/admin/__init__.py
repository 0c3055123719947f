"""Admin use cases for the shared default course."""

from .create_default_course import (
    CreateDefaultCourseRequest,
    CreateDefaultCourseUseCase,
)
from .create_default_question import (
    CreateDefaultQuestionRequest,
    CreateDefaultQuestionUseCase,
)
from .guard import AdminGuard
from .list_default_questions import (
    ListDefaultQuestionsRequest,
    ListDefaultQuestionsResponse,
    ListDefaultQuestionsUseCase,
)
from .remove_default_question import (
    RemoveDefaultQuestionRequest,
    RemoveDefaultQuestionResponse,
    RemoveDefaultQuestionUseCase,
)
from .update_default_question import (
    UpdateDefaultQuestionRequest,
    UpdateDefaultQuestionUseCase,
)

__all__ = [
    "AdminGuard",
    "CreateDefaultCourseRequest",
    "CreateDefaultCourseUseCase",
    "CreateDefaultQuestionRequest",
    "CreateDefaultQuestionUseCase",
    "ListDefaultQuestionsRequest",
    "ListDefaultQuestionsResponse",
    "ListDefaultQuestionsUseCase",
    "RemoveDefaultQuestionRequest",
    "RemoveDefaultQuestionResponse",
    "RemoveDefaultQuestionUseCase",
    "UpdateDefaultQuestionRequest",
    "UpdateDefaultQuestionUseCase",
]
