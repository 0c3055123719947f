"""List solved questions use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from prep.application.usecase.caller import CallerResolver
from prep.domain.service import QuestionService, SolvedQuestionService
from prep.domain.value import CourseId, Difficulty


class SolvedQuestionSummary(BaseModel):
    """Question summary inside a solved mark."""

    id: UUID
    title: str
    difficulty: Difficulty
    topics: list[str]
    urls: list[str]


class SolvedQuestionEntry(BaseModel):
    """Solved mark with its question."""

    id: UUID
    question_id: UUID
    solved_at: datetime
    question: SolvedQuestionSummary | None


class ListSolvedRequest(BaseModel):
    """List solved questions request."""

    token: str | None
    course_id: UUID | None = None


class ListSolvedResponse(BaseModel):
    """List solved questions response."""

    solved_questions: list[SolvedQuestionEntry]


class ListSolvedUseCase:
    """Use case for listing the caller's solved questions."""

    def __init__(
        self,
        caller_resolver: CallerResolver,
        question_service: QuestionService,
        solved_question_service: SolvedQuestionService,
    ) -> None:
        """Initialize list solved use case.

        Args:
            caller_resolver: Session token resolver
            question_service: Question domain service
            solved_question_service: Solved question domain service
        """
        self.caller_resolver = caller_resolver
        self.question_service = question_service
        self.solved_question_service = solved_question_service

    async def execute(self, request: ListSolvedRequest) -> ListSolvedResponse:
        """Execute list solved flow, newest first.

        Raises:
            UnauthenticatedError: If the token is missing or invalid
            NotFoundError: If the caller was never synced
        """
        user = await self.caller_resolver.require_user(request.token)
        course_id = CourseId(request.course_id) if request.course_id else None

        solved = await self.solved_question_service.list_solved(user.id, course_id)
        questions = {q.id: q for q in await self.question_service.list_all()}

        entries = []
        for mark in solved:
            question = questions.get(mark.question_id)
            entries.append(
                SolvedQuestionEntry(
                    id=mark.id,
                    question_id=mark.question_id,
                    solved_at=mark.solved_at,
                    question=(
                        SolvedQuestionSummary(
                            id=question.id,
                            title=question.title,
                            difficulty=question.difficulty,
                            topics=list(question.topics),
                            urls=list(question.urls),
                        )
                        if question
                        else None
                    ),
                )
            )

        return ListSolvedResponse(solved_questions=entries)
