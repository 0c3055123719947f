"""Delete course use case."""

from uuid import UUID

from pydantic import BaseModel

from prep.application.usecase.caller import CallerResolver
from prep.domain.service import CourseService, UserService
from prep.domain.value import CourseId


class DeleteCourseRequest(BaseModel):
    """Delete course request."""

    token: str | None
    course_id: UUID


class DeleteCourseResponse(BaseModel):
    """Delete course response."""

    message: str
    deleted_course_id: UUID
    title: str
    question_count: int


class DeleteCourseUseCase:
    """Use case for deleting one of the caller's courses."""

    def __init__(
        self,
        caller_resolver: CallerResolver,
        user_service: UserService,
        course_service: CourseService,
    ) -> None:
        """Initialize delete course use case.

        Args:
            caller_resolver: Session token resolver
            user_service: User domain service
            course_service: Course domain service
        """
        self.caller_resolver = caller_resolver
        self.user_service = user_service
        self.course_service = course_service

    async def execute(self, request: DeleteCourseRequest) -> DeleteCourseResponse:
        """Execute delete course flow.

        Raises:
            UnauthenticatedError: If the token is missing or invalid
            NotFoundError: If the caller or the course does not exist
            NotAuthorizedError: If the course is default or someone else's
        """
        user = await self.caller_resolver.require_user(request.token)

        course = await self.course_service.delete_course(
            user, CourseId(request.course_id)
        )
        await self.user_service.decrement_courses_created(user.id)

        return DeleteCourseResponse(
            message="Course deleted successfully",
            deleted_course_id=course.id,
            title=course.title,
            question_count=course.question_count,
        )
