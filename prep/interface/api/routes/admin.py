"""Admin routes for the shared default course."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel, ConfigDict, Field

from prep.application.usecase.admin import (
    CreateDefaultCourseRequest,
    CreateDefaultCourseUseCase,
    CreateDefaultQuestionRequest,
    CreateDefaultQuestionUseCase,
    ListDefaultQuestionsRequest,
    ListDefaultQuestionsResponse,
    ListDefaultQuestionsUseCase,
    RemoveDefaultQuestionRequest,
    RemoveDefaultQuestionResponse,
    RemoveDefaultQuestionUseCase,
    UpdateDefaultQuestionRequest,
    UpdateDefaultQuestionUseCase,
)
from prep.application.usecase.dto import CourseInfo, QuestionInfo
from prep.config import AuthSettings
from prep.domain.value import Difficulty
from prep.interface.api.session import extract_session_token
from prep.interface.error import error_response

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class CreateDefaultCourseAPIRequest(BaseModel):
    """API request for creating a default course."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=200)


class CreateDefaultQuestionAPIRequest(BaseModel):
    """API request for adding a question to the default course."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=300)
    topics: list[str] = Field(default_factory=list)
    urls: list[str] = Field(default_factory=list)
    difficulty: Difficulty


class UpdateDefaultQuestionAPIRequest(BaseModel):
    """API request for editing a default course question."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str | None = Field(default=None, min_length=1, max_length=300)
    topics: list[str] | None = None
    urls: list[str] | None = None
    difficulty: Difficulty | None = None


@router.post(
    "/courses", response_model=CourseInfo, status_code=status.HTTP_201_CREATED
)
async def create_default_course(
    body: CreateDefaultCourseAPIRequest,
    request: Request,
    use_case: FromDishka[CreateDefaultCourseUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> CourseInfo:
    """Create a course shown to every user.

    Raises:
        HTTPException: 401 unauthenticated, 403 not an admin,
            409 duplicate title
    """
    token = extract_session_token(request, auth_settings)
    try:
        return await use_case.execute(
            CreateDefaultCourseRequest(token=token, title=body.title)
        )
    except Exception as e:
        raise error_response(e, "Failed to create course") from e


@router.get("/questions", response_model=ListDefaultQuestionsResponse)
async def list_default_questions(
    request: Request,
    use_case: FromDishka[ListDefaultQuestionsUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> ListDefaultQuestionsResponse:
    """List the default course's questions, newest first."""
    token = extract_session_token(request, auth_settings)
    try:
        return await use_case.execute(ListDefaultQuestionsRequest(token=token))
    except Exception as e:
        raise error_response(e, "Failed to fetch questions") from e


@router.post(
    "/questions", response_model=QuestionInfo, status_code=status.HTTP_201_CREATED
)
async def create_default_question(
    body: CreateDefaultQuestionAPIRequest,
    request: Request,
    use_case: FromDishka[CreateDefaultQuestionUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> QuestionInfo:
    """Add a question to the default course.

    Args:
        body: Question data
        request: Incoming request carrying the session token
        use_case: Create default question use case from DI
        auth_settings: Authentication settings from DI

    Returns:
        Created question

    Raises:
        HTTPException: 401 unauthenticated, 403 not an admin,
            404 no default course, 409 duplicate title
    """
    token = extract_session_token(request, auth_settings)
    try:
        return await use_case.execute(
            CreateDefaultQuestionRequest(token=token, **body.model_dump())
        )
    except Exception as e:
        raise error_response(e, "Failed to create question") from e


@router.put("/questions/{question_id}", response_model=QuestionInfo)
async def update_default_question(
    question_id: UUID,
    body: UpdateDefaultQuestionAPIRequest,
    request: Request,
    use_case: FromDishka[UpdateDefaultQuestionUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> QuestionInfo:
    """Edit a default course question. Omitted fields stay unchanged."""
    token = extract_session_token(request, auth_settings)
    try:
        return await use_case.execute(
            UpdateDefaultQuestionRequest(
                token=token, question_id=question_id, **body.model_dump()
            )
        )
    except Exception as e:
        raise error_response(e, "Failed to update question") from e


@router.delete("/questions/{question_id}", response_model=RemoveDefaultQuestionResponse)
async def remove_default_question(
    question_id: UUID,
    request: Request,
    use_case: FromDishka[RemoveDefaultQuestionUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> RemoveDefaultQuestionResponse:
    """Take a question out of the default course.

    Raises:
        HTTPException: 401 unauthenticated, 403 not an admin,
            404 question not in the default course
    """
    token = extract_session_token(request, auth_settings)
    try:
        return await use_case.execute(
            RemoveDefaultQuestionRequest(token=token, question_id=question_id)
        )
    except Exception as e:
        raise error_response(e, "Failed to delete question") from e
