"""Mark question solved use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from prep.application.usecase.caller import CallerResolver
from prep.domain.service import QuestionService, SolvedQuestionService
from prep.domain.value import QuestionId


class MarkSolvedRequest(BaseModel):
    """Mark solved request."""

    token: str | None
    question_id: UUID


class MarkSolvedResponse(BaseModel):
    """Mark solved response."""

    message: str
    question_id: UUID
    solved_at: datetime


class MarkSolvedUseCase:
    """Use case for marking a question solved."""

    def __init__(
        self,
        caller_resolver: CallerResolver,
        question_service: QuestionService,
        solved_question_service: SolvedQuestionService,
    ) -> None:
        """Initialize mark solved use case.

        Args:
            caller_resolver: Session token resolver
            question_service: Question domain service
            solved_question_service: Solved question domain service
        """
        self.caller_resolver = caller_resolver
        self.question_service = question_service
        self.solved_question_service = solved_question_service

    async def execute(self, request: MarkSolvedRequest) -> MarkSolvedResponse:
        """Execute mark solved flow (re-solving refreshes solved_at).

        Raises:
            UnauthenticatedError: If the token is missing or invalid
            NotFoundError: If the caller or question does not exist
        """
        user = await self.caller_resolver.require_user(request.token)
        question = await self.question_service.get_question(
            QuestionId(request.question_id)
        )

        solved = await self.solved_question_service.mark_solved(user.id, question.id)

        return MarkSolvedResponse(
            message="Question marked as solved",
            question_id=solved.question_id,
            solved_at=solved.solved_at,
        )
