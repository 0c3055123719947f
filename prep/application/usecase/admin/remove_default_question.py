"""Remove default course question use case."""

from uuid import UUID

from pydantic import BaseModel

from prep.application.usecase.admin.guard import AdminGuard
from prep.domain.error import NotFoundError
from prep.domain.service import CourseService, QuestionService
from prep.domain.value import QuestionId


class RemoveDefaultQuestionRequest(BaseModel):
    """Remove default course question request."""

    token: str | None
    question_id: UUID


class RemoveDefaultQuestionResponse(BaseModel):
    """Remove default course question response."""

    message: str
    question_id: UUID
    deleted: bool  # False when user courses still hold the question


class RemoveDefaultQuestionUseCase:
    """Use case for an admin taking a question out of the default course."""

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
        self, request: RemoveDefaultQuestionRequest
    ) -> RemoveDefaultQuestionResponse:
        """Unlink the question from the default course.

        The question is deleted outright when no other course holds it.

        Raises:
            UnauthenticatedError: If the token is missing or invalid
            NotAuthorizedError: If the caller is not an admin
            NotFoundError: If there is no default course or the question
                is not in it
        """
        await self.admin_guard.require_admin(request.token)
        course = await self.course_service.get_default_course()

        question = await self.question_service.get_question(
            QuestionId(request.question_id)
        )
        if course.id not in question.course_ids:
            raise NotFoundError("Question in default course", str(question.id))

        deleted = await self.question_service.remove_from_courses(question, [course])
        await self.course_service.decrement_question_count(course.id)

        return RemoveDefaultQuestionResponse(
            message="Question removed successfully",
            question_id=question.id,
            deleted=deleted,
        )
