"""Delete question use case."""

from uuid import UUID

from pydantic import BaseModel

from prep.application.usecase.caller import CallerResolver
from prep.domain.service import (
    CourseService,
    QuestionService,
    SolvedQuestionService,
    UserService,
)
from prep.domain.value import QuestionId


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    token: str | None
    question_id: UUID


class DeleteQuestionResponse(BaseModel):
    """Delete question response."""

    message: str
    deleted_question_id: UUID
    title: str
    removed_from_courses: int
    question_deleted: bool


class DeleteQuestionUseCase:
    """Use case for removing a question from the caller's courses."""

    def __init__(
        self,
        caller_resolver: CallerResolver,
        user_service: UserService,
        course_service: CourseService,
        question_service: QuestionService,
        solved_question_service: SolvedQuestionService,
    ) -> None:
        """Initialize delete question use case.

        Args:
            caller_resolver: Session token resolver
            user_service: User domain service
            course_service: Course domain service
            question_service: Question domain service
            solved_question_service: Solved question domain service
        """
        self.caller_resolver = caller_resolver
        self.user_service = user_service
        self.course_service = course_service
        self.question_service = question_service
        self.solved_question_service = solved_question_service

    async def execute(self, request: DeleteQuestionRequest) -> DeleteQuestionResponse:
        """Execute delete question flow.

        Steps:
        1. Resolve the caller's local user and load the question
        2. Unlink it from the caller's courses, decrementing their counts
        3. Delete it outright when no course links remain
        4. Drop the caller's solved mark and bookmark for it

        Raises:
            UnauthenticatedError: If the token is missing or invalid
            NotFoundError: If the caller or question does not exist
            NotAuthorizedError: If none of the question's courses is the caller's
        """
        user = await self.caller_resolver.require_user(request.token)
        question = await self.question_service.get_question(
            QuestionId(request.question_id)
        )

        owned_courses = await self.course_service.find_owned_among(
            user.id, question.course_ids
        )
        question_deleted = await self.question_service.remove_from_courses(
            question, owned_courses
        )
        for course in owned_courses:
            await self.course_service.decrement_question_count(course.id)

        await self.solved_question_service.unmark_solved(user.id, question.id)
        if user.has_bookmarked(question.id):
            await self.user_service.remove_bookmark(user.id, question.id)

        return DeleteQuestionResponse(
            message="Question deleted successfully",
            deleted_question_id=question.id,
            title=question.title,
            removed_from_courses=len(owned_courses),
            question_deleted=question_deleted,
        )
