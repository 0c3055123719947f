"""Question use cases."""

from .create_question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
)
from .delete_question import (
    DeleteQuestionRequest,
    DeleteQuestionResponse,
    DeleteQuestionUseCase,
)
from .list_questions import ListQuestionsResponse, ListQuestionsUseCase
from .parse_question import (
    ParseQuestionRequest,
    ParseQuestionResponse,
    ParseQuestionUseCase,
)

__all__ = [
    "CreateQuestionRequest",
    "CreateQuestionResponse",
    "CreateQuestionUseCase",
    "DeleteQuestionRequest",
    "DeleteQuestionResponse",
    "DeleteQuestionUseCase",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "ParseQuestionRequest",
    "ParseQuestionResponse",
    "ParseQuestionUseCase",
]
