"""Create default course use case."""

from pydantic import BaseModel, Field

from prep.application.usecase.admin.guard import AdminGuard
from prep.application.usecase.dto import CourseInfo
from prep.domain.service import CourseService


class CreateDefaultCourseRequest(BaseModel):
    """Create default course request."""

    token: str | None
    title: str = Field(min_length=1, max_length=200)


class CreateDefaultCourseUseCase:
    """Use case for an admin adding a course every user sees."""

    def __init__(self, admin_guard: AdminGuard, course_service: CourseService) -> None:
        self.admin_guard = admin_guard
        self.course_service = course_service

    async def execute(self, request: CreateDefaultCourseRequest) -> CourseInfo:
        """Create the course.

        Raises:
            UnauthenticatedError: If the token is missing or invalid
            NotAuthorizedError: If the caller is not an admin
            ConflictError: If a default course already has this title
        """
        await self.admin_guard.require_admin(request.token)
        course = await self.course_service.create_default_course(request.title.strip())
        return CourseInfo.from_course(course)
