"""List questions use case."""

from pydantic import BaseModel

from prep.application.usecase.dto import QuestionInfo
from prep.domain.service import QuestionService


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionInfo]


class ListQuestionsUseCase:
    """Use case for listing every question with its course ids."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self) -> ListQuestionsResponse:
        """Execute list questions flow."""
        questions = await self.question_service.list_all()
        return ListQuestionsResponse(
            questions=[QuestionInfo.from_question(q) for q in questions]
        )
