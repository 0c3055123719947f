"""List default course questions use case."""

from pydantic import BaseModel

from prep.application.usecase.admin.guard import AdminGuard
from prep.application.usecase.dto import CourseInfo, QuestionInfo
from prep.domain.service import CourseService, QuestionService


class ListDefaultQuestionsRequest(BaseModel):
    """List default course questions request."""

    token: str | None


class ListDefaultQuestionsResponse(BaseModel):
    """The default course with its questions, newest first."""

    course: CourseInfo
    questions: list[QuestionInfo]
    questions_count: int


class ListDefaultQuestionsUseCase:
    """Use case for the admin view of the default course."""

    def __init__(
        self,
        admin_guard: AdminGuard,
        course_service: CourseService,
        question_service: QuestionService,
    ) -> None:
        self.admin_guard = admin_guard
        self.course_service = course_service
        self.question_service = question_service

    async def execute(
        self, request: ListDefaultQuestionsRequest
    ) -> ListDefaultQuestionsResponse:
        """List the default course's questions.

        Raises:
            UnauthenticatedError: If the token is missing or invalid
            NotAuthorizedError: If the caller is not an admin
            NotFoundError: If no default course exists
        """
        await self.admin_guard.require_admin(request.token)
        course = await self.course_service.get_default_course()
        questions = await self.question_service.list_for_courses([course.id])
        newest_first = sorted(questions, key=lambda q: q.created_at, reverse=True)

        return ListDefaultQuestionsResponse(
            course=CourseInfo.from_course(course),
            questions=[QuestionInfo.from_question(q) for q in newest_first],
            questions_count=len(newest_first),
        )
