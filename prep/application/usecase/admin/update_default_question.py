"""Update default course question use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from prep.application.usecase.admin.guard import AdminGuard
from prep.application.usecase.dto import QuestionInfo
from prep.domain.error import NotFoundError
from prep.domain.service import CourseService, QuestionService
from prep.domain.value import Difficulty, QuestionId


class UpdateDefaultQuestionRequest(BaseModel):
    """Update default course question request. None leaves a field as is."""

    token: str | None
    question_id: UUID
    title: str | None = Field(default=None, min_length=1, max_length=300)
    topics: list[str] | None = None
    urls: list[str] | None = None
    difficulty: Difficulty | None = None


class UpdateDefaultQuestionUseCase:
    """Use case for an admin editing a default course question."""

    def __init__(
        self,
        admin_guard: AdminGuard,
        course_service: CourseService,
        question_service: QuestionService,
    ) -> None:
        self.admin_guard = admin_guard
        self.course_service = course_service
        self.question_service = question_service

    async def execute(self, request: UpdateDefaultQuestionRequest) -> QuestionInfo:
        """Update the question.

        Raises:
            UnauthenticatedError: If the token is missing or invalid
            NotAuthorizedError: If the caller is not an admin
            NotFoundError: If there is no default course or the question
                is not in it
            ConflictError: If another question in the course has the new title
        """
        await self.admin_guard.require_admin(request.token)
        course = await self.course_service.get_default_course()

        question = await self.question_service.get_question(
            QuestionId(request.question_id)
        )
        if course.id not in question.course_ids:
            raise NotFoundError("Question in default course", str(question.id))

        title = request.title.strip() if request.title else None
        if title is not None and title != question.title:
            await self.question_service.ensure_title_unused(course, title)

        urls = request.urls
        if urls is not None:
            urls = [url.strip() for url in urls if url.strip()]

        updated = await self.question_service.update_question(
            question,
            title=title,
            topics=request.topics,
            urls=urls,
            difficulty=request.difficulty,
        )
        return QuestionInfo.from_question(updated)
