"""Create default course question use case."""

from pydantic import BaseModel, Field

from prep.application.usecase.admin.guard import AdminGuard
from prep.application.usecase.dto import QuestionInfo
from prep.domain.service import CourseService, QuestionService
from prep.domain.value import Difficulty


class CreateDefaultQuestionRequest(BaseModel):
    """Create default course question request."""

    token: str | None
    title: str = Field(min_length=1, max_length=300)
    topics: list[str]
    urls: list[str]
    difficulty: Difficulty


class CreateDefaultQuestionUseCase:
    """Use case for an admin adding a question to the default course.

    The per-course question limit applies to user courses only.
    """

    def __init__(
        self,
        admin_guard: AdminGuard,
        course_service: CourseService,
        question_service: QuestionService,
    ) -> None:
        self.admin_guard = admin_guard
        self.course_service = course_service
        self.question_service = question_service

    async def execute(self, request: CreateDefaultQuestionRequest) -> QuestionInfo:
        """Create the question inside the default course.

        Raises:
            UnauthenticatedError: If the token is missing or invalid
            NotAuthorizedError: If the caller is not an admin
            NotFoundError: If no default course exists
            ConflictError: If the default course has a question with this title
        """
        await self.admin_guard.require_admin(request.token)
        course = await self.course_service.get_default_course()

        title = request.title.strip()
        await self.question_service.ensure_title_unused(course, title)

        question = await self.question_service.create_question(
            course=course,
            title=title,
            topics=request.topics,
            urls=[url.strip() for url in request.urls if url.strip()],
            difficulty=request.difficulty,
        )
        await self.course_service.increment_question_count(course.id)
        return QuestionInfo.from_question(question)
