"""Get current user use case."""

from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel

from prep.application.usecase.caller import CallerResolver
from prep.application.usecase.dto import CourseInfo, SolvedQuestionInfo
from prep.domain.service import CourseService, SolvedQuestionService, calculate_streak


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str | None


class LimitsInfo(BaseModel):
    """Course limits for the user (-1 = unlimited)."""

    max_courses: int
    max_questions_per_course: int
    courses_used: int
    courses_remaining: int
    can_create_course: bool


class StatsInfo(BaseModel):
    """Usage statistics."""

    total_questions_solved: int
    courses_created: int
    questions_bookmarked: int
    streak_days: int


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    id: UUID
    external_id: str
    name: str | None
    email: str | None
    total_courses_created: int
    bookmarked_question_ids: list[UUID]
    created_at: datetime
    limits: LimitsInfo
    courses: list[CourseInfo]
    solved_questions: list[SolvedQuestionInfo]
    stats: StatsInfo


class GetCurrentUserUseCase:
    """Use case for the signed-in user's profile, limits and stats."""

    def __init__(
        self,
        caller_resolver: CallerResolver,
        course_service: CourseService,
        solved_question_service: SolvedQuestionService,
    ) -> None:
        """Initialize get current user use case.

        Args:
            caller_resolver: Session token resolver
            course_service: Course domain service
            solved_question_service: Solved question domain service
        """
        self.caller_resolver = caller_resolver
        self.course_service = course_service
        self.solved_question_service = solved_question_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Raises:
            UnauthenticatedError: If the token is missing or invalid
            NotFoundError: If the caller was never synced
        """
        user = await self.caller_resolver.require_user(request.token)

        courses = await self.course_service.list_owned(user.id)
        solved = await self.solved_question_service.list_solved(user.id)

        limits = self.course_service.limits
        courses_used, courses_remaining = await self.course_service.courses_remaining(
            user.id
        )

        return GetCurrentUserResponse(
            id=user.id,
            external_id=user.external_id.root,
            name=user.name,
            email=user.email,
            total_courses_created=user.total_courses_created,
            bookmarked_question_ids=list(user.bookmarked_question_ids),
            created_at=user.created_at,
            limits=LimitsInfo(
                max_courses=limits.max_courses,
                max_questions_per_course=limits.max_questions_per_course,
                courses_used=courses_used,
                courses_remaining=courses_remaining,
                can_create_course=courses_remaining != 0,
            ),
            courses=[CourseInfo.from_course(c) for c in courses],
            solved_questions=[SolvedQuestionInfo.from_solved(s) for s in solved],
            stats=StatsInfo(
                total_questions_solved=len(solved),
                courses_created=len(courses),
                questions_bookmarked=len(user.bookmarked_question_ids),
                streak_days=calculate_streak(
                    (s.solved_at for s in solved),
                    datetime.now(timezone.utc).date(),
                ),
            ),
        )
