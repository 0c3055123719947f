"""Unmark question solved use case."""

from uuid import UUID

from pydantic import BaseModel

from prep.application.usecase.caller import CallerResolver
from prep.domain.service import SolvedQuestionService
from prep.domain.value import QuestionId


class UnmarkSolvedRequest(BaseModel):
    """Unmark solved request."""

    token: str | None
    question_id: UUID


class UnmarkSolvedResponse(BaseModel):
    """Unmark solved response."""

    message: str
    question_id: UUID
    was_solved: bool


class UnmarkSolvedUseCase:
    """Use case for removing a solved mark."""

    def __init__(
        self,
        caller_resolver: CallerResolver,
        solved_question_service: SolvedQuestionService,
    ) -> None:
        """Initialize unmark solved use case.

        Args:
            caller_resolver: Session token resolver
            solved_question_service: Solved question domain service
        """
        self.caller_resolver = caller_resolver
        self.solved_question_service = solved_question_service

    async def execute(self, request: UnmarkSolvedRequest) -> UnmarkSolvedResponse:
        """Execute unmark solved flow (absent marks are not an error).

        Raises:
            UnauthenticatedError: If the token is missing or invalid
            NotFoundError: If the caller was never synced
        """
        user = await self.caller_resolver.require_user(request.token)
        question_id = QuestionId(request.question_id)

        removed = await self.solved_question_service.unmark_solved(
            user.id, question_id
        )

        return UnmarkSolvedResponse(
            message=(
                "Question unmarked as solved"
                if removed
                else "Question was not marked as solved"
            ),
            question_id=question_id,
            was_solved=removed,
        )
