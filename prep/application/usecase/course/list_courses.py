"""List courses use case."""

from pydantic import BaseModel

from prep.application.usecase.caller import CallerResolver
from prep.application.usecase.dto import CourseInfo, QuestionInfo
from prep.domain.service import CourseService, QuestionService, SolvedQuestionService


class ListCoursesRequest(BaseModel):
    """List courses request."""

    token: str | None = None


class CourseQuestionInfo(QuestionInfo):
    """Question inside a course, annotated for the caller."""

    is_solved: bool


class CourseWithQuestions(CourseInfo):
    """Course with its questions."""

    questions: list[CourseQuestionInfo]


class ListCoursesResponse(BaseModel):
    """List courses response."""

    courses: list[CourseWithQuestions]


class ListCoursesUseCase:
    """Use case for listing the courses visible to the caller."""

    def __init__(
        self,
        caller_resolver: CallerResolver,
        course_service: CourseService,
        question_service: QuestionService,
        solved_question_service: SolvedQuestionService,
    ) -> None:
        """Initialize list courses use case.

        Args:
            caller_resolver: Session token resolver
            course_service: Course domain service
            question_service: Question domain service
            solved_question_service: Solved question domain service
        """
        self.caller_resolver = caller_resolver
        self.course_service = course_service
        self.question_service = question_service
        self.solved_question_service = solved_question_service

    async def execute(self, request: ListCoursesRequest) -> ListCoursesResponse:
        """Execute list courses flow.

        Steps:
        1. Resolve the caller (anonymous and unsynced callers are allowed)
        2. Load default courses plus the caller's own
        3. Batch-load their questions and the caller's solved set
        4. Annotate each question with is_solved

        Args:
            request: Request with optional session token

        Returns:
            Courses with their questions
        """
        user = await self.caller_resolver.find_user(request.token)
        user_id = user.id if user else None

        courses = await self.course_service.list_visible(user_id)
        questions = await self.question_service.list_for_courses(
            [course.id for course in courses]
        )
        solved_ids = await self.solved_question_service.solved_question_ids(user_id)

        result = []
        for course in courses:
            course_questions = [
                CourseQuestionInfo(
                    **QuestionInfo.from_question(q).model_dump(),
                    is_solved=q.id in solved_ids,
                )
                for q in questions
                if course.id in q.course_ids
            ]
            result.append(
                CourseWithQuestions(
                    **CourseInfo.from_course(course).model_dump(),
                    questions=course_questions,
                )
            )

        return ListCoursesResponse(courses=result)
