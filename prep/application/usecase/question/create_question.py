"""Create question use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from prep.application.usecase.caller import CallerResolver
from prep.application.usecase.dto import QuestionInfo
from prep.domain.service import CourseService, QuestionService
from prep.domain.value import CourseId, Difficulty


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    token: str | None
    course_id: UUID
    title: str = Field(min_length=1, max_length=300)
    topics: list[str] = Field(default_factory=list)
    urls: list[str] = Field(default_factory=list)
    difficulty: Difficulty


class CreateQuestionResponse(QuestionInfo):
    """Create question response."""

    pass


class CreateQuestionUseCase:
    """Use case for adding a question to one of the caller's courses."""

    def __init__(
        self,
        caller_resolver: CallerResolver,
        course_service: CourseService,
        question_service: QuestionService,
    ) -> None:
        """Initialize create question use case.

        Args:
            caller_resolver: Session token resolver
            course_service: Course domain service
            question_service: Question domain service
        """
        self.caller_resolver = caller_resolver
        self.course_service = course_service
        self.question_service = question_service

    async def execute(self, request: CreateQuestionRequest) -> CreateQuestionResponse:
        """Execute create question flow.

        Steps:
        1. Resolve the caller's local user
        2. Load the target course (must be the caller's own user course)
        3. Check the per-course question limit
        4. Create the question and bump the course's question count

        Raises:
            UnauthenticatedError: If the token is missing or invalid
            NotFoundError: If the caller or course does not exist, or the
                course is not the caller's
            LimitExceededError: If the course reached max_questions_per_course
        """
        user = await self.caller_resolver.require_user(request.token)

        course = await self.course_service.get_owned_course(
            user.id, CourseId(request.course_id)
        )
        self.course_service.ensure_question_capacity(course)

        question = await self.question_service.create_question(
            course=course,
            title=request.title.strip(),
            topics=request.topics,
            urls=request.urls,
            difficulty=request.difficulty,
        )
        await self.course_service.increment_question_count(course.id)

        return CreateQuestionResponse(**QuestionInfo.from_question(question).model_dump())
