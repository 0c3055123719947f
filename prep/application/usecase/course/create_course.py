"""Create course use case."""

from pydantic import BaseModel, Field

from prep.application.usecase.caller import CallerResolver
from prep.application.usecase.dto import CourseInfo
from prep.domain.service import CourseService, IdentityService, UserService


class CreateCourseRequest(BaseModel):
    """Create course request."""

    token: str | None
    title: str = Field(min_length=1, max_length=200)


class CreateCourseResponse(CourseInfo):
    """Create course response."""

    pass


class CreateCourseUseCase:
    """Use case for creating a user course."""

    def __init__(
        self,
        caller_resolver: CallerResolver,
        identity_service: IdentityService,
        user_service: UserService,
        course_service: CourseService,
    ) -> None:
        """Initialize create course use case.

        Args:
            caller_resolver: Session token resolver
            identity_service: Identity provider domain service
            user_service: User domain service
            course_service: Course domain service
        """
        self.caller_resolver = caller_resolver
        self.identity_service = identity_service
        self.user_service = user_service
        self.course_service = course_service

    async def execute(self, request: CreateCourseRequest) -> CreateCourseResponse:
        """Execute create course flow.

        Steps:
        1. Resolve the caller's external id
        2. Sync the caller's local user (same upsert as the sync endpoint)
        3. Check the course limit and create the course
        4. Increment the user's created-courses counter

        Raises:
            UnauthenticatedError: If the token is missing or invalid
            IdentityNotFoundError: If the provider does not know the caller
            LimitExceededError: If the caller reached max_courses
        """
        external_id = await self.caller_resolver.require_external_id(request.token)
        identity = await self.identity_service.get_identity(external_id)
        user = await self.user_service.sync_identity(identity)

        course = await self.course_service.create_course(user, request.title.strip())
        await self.user_service.increment_courses_created(user.id)

        return CreateCourseResponse(**CourseInfo.from_course(course).model_dump())
