"""Course routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel, ConfigDict, Field

from prep.application.usecase.course import (
    CourseWithQuestions,
    CreateCourseRequest,
    CreateCourseResponse,
    CreateCourseUseCase,
    DeleteCourseRequest,
    DeleteCourseResponse,
    DeleteCourseUseCase,
    ListCoursesRequest,
    ListCoursesUseCase,
)
from prep.config import AuthSettings
from prep.interface.api.session import extract_session_token
from prep.interface.error import error_response

router = APIRouter(prefix="/courses", tags=["courses"], route_class=DishkaRoute)


class CreateCourseAPIRequest(BaseModel):
    """API request for creating a course."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=200)


@router.get("", response_model=list[CourseWithQuestions])
async def list_courses(
    request: Request,
    list_courses_use_case: FromDishka[ListCoursesUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> list[CourseWithQuestions]:
    """List default courses plus the caller's own courses.

    Authentication is optional. Anonymous callers get the default courses
    with every question marked unsolved.

    Returns:
        Courses with their questions, each annotated with is_solved
    """
    token = extract_session_token(request, auth_settings)
    try:
        result = await list_courses_use_case.execute(ListCoursesRequest(token=token))
    except Exception as e:
        raise error_response(e, "Failed to fetch courses") from e
    return result.courses


@router.post("", response_model=CreateCourseResponse, status_code=status.HTTP_201_CREATED)
async def create_course(
    body: CreateCourseAPIRequest,
    request: Request,
    create_course_use_case: FromDishka[CreateCourseUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> CreateCourseResponse:
    """Create a course owned by the caller.

    Requires authentication. Syncs the caller's local user first.

    Args:
        body: Course creation data
        request: Incoming request carrying the session token
        create_course_use_case: Create course use case from DI
        auth_settings: Authentication settings from DI

    Returns:
        Created course

    Raises:
        HTTPException: 401 unauthenticated, 403 course limit reached
    """
    token = extract_session_token(request, auth_settings)
    try:
        return await create_course_use_case.execute(
            CreateCourseRequest(token=token, title=body.title)
        )
    except Exception as e:
        raise error_response(e, "Failed to create course") from e


@router.delete("/{course_id}", response_model=DeleteCourseResponse)
async def delete_course(
    course_id: UUID,
    request: Request,
    delete_course_use_case: FromDishka[DeleteCourseUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> DeleteCourseResponse:
    """Delete one of the caller's courses.

    Raises:
        HTTPException: 401 unauthenticated, 404 unknown user or course,
            403 default course or someone else's course
    """
    token = extract_session_token(request, auth_settings)
    try:
        return await delete_course_use_case.execute(
            DeleteCourseRequest(token=token, course_id=course_id)
        )
    except Exception as e:
        raise error_response(e, "Failed to delete course") from e
