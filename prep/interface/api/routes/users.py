"""User routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from prep.application.usecase.bookmark import (
    ListBookmarksRequest,
    ListBookmarksResponse,
    ListBookmarksUseCase,
)
from prep.application.usecase.solved import (
    ListSolvedRequest,
    ListSolvedUseCase,
    SolvedQuestionEntry,
)
from prep.application.usecase.user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from prep.config import AuthSettings
from prep.interface.api.session import extract_session_token
from prep.interface.error import error_response

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_current_user(
    request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> GetCurrentUserResponse:
    """Get the caller's profile, courses, limits and stats.

    Raises:
        HTTPException: 401 unauthenticated, 404 caller never synced

    Example:
        GET /api/users/me

        Response:
        {
            "id": "123e4567-e89b-12d3-a456-426614174000",
            "external_id": "user_2abc",
            "limits": {"max_courses": -1, "courses_remaining": -1, ...},
            "stats": {"total_questions_solved": 3, "streak_days": 2, ...},
            ...
        }
    """
    token = extract_session_token(request, auth_settings)
    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
    except Exception as e:
        raise error_response(e, "Failed to fetch user information") from e


@router.get("/bookmarks", response_model=ListBookmarksResponse)
async def list_bookmarks(
    request: Request,
    list_bookmarks_use_case: FromDishka[ListBookmarksUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> ListBookmarksResponse:
    """List the caller's bookmarked question ids."""
    token = extract_session_token(request, auth_settings)
    try:
        return await list_bookmarks_use_case.execute(ListBookmarksRequest(token=token))
    except Exception as e:
        raise error_response(e, "Failed to fetch bookmarks") from e


@router.get("/solved-questions", response_model=list[SolvedQuestionEntry])
async def list_solved_questions(
    request: Request,
    list_solved_use_case: FromDishka[ListSolvedUseCase],
    auth_settings: FromDishka[AuthSettings],
    course_id: UUID | None = None,
) -> list[SolvedQuestionEntry]:
    """List the caller's solved questions, newest first.

    Args:
        course_id: Only include questions from this course
    """
    token = extract_session_token(request, auth_settings)
    try:
        result = await list_solved_use_case.execute(
            ListSolvedRequest(token=token, course_id=course_id)
        )
    except Exception as e:
        raise error_response(e, "Failed to fetch solved questions") from e
    return result.solved_questions
