"""Question routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel, ConfigDict, Field

from prep.application.usecase.bookmark import (
    AddBookmarkRequest,
    AddBookmarkUseCase,
    BookmarkResponse,
    RemoveBookmarkRequest,
    RemoveBookmarkUseCase,
)
from prep.application.usecase.dto import QuestionInfo
from prep.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionResponse,
    DeleteQuestionUseCase,
    ListQuestionsUseCase,
)
from prep.application.usecase.solved import (
    MarkSolvedRequest,
    MarkSolvedResponse,
    MarkSolvedUseCase,
    UnmarkSolvedRequest,
    UnmarkSolvedResponse,
    UnmarkSolvedUseCase,
)
from prep.config import AuthSettings
from prep.domain.value import Difficulty
from prep.interface.api.session import extract_session_token
from prep.interface.error import error_response

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for adding a question to a course."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=300)
    topics: list[str] = Field(default_factory=list)
    urls: list[str] = Field(default_factory=list)
    difficulty: Difficulty
    course_id: UUID


@router.get("", response_model=list[QuestionInfo])
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
) -> list[QuestionInfo]:
    """List all questions with the ids of the courses containing them."""
    try:
        result = await list_questions_use_case.execute()
    except Exception as e:
        raise error_response(e, "Failed to fetch questions") from e
    return result.questions


@router.post(
    "", response_model=CreateQuestionResponse, status_code=status.HTTP_201_CREATED
)
async def create_question(
    body: CreateQuestionAPIRequest,
    request: Request,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> CreateQuestionResponse:
    """Add a question to one of the caller's courses.

    Raises:
        HTTPException: 401 unauthenticated, 404 unknown user or course,
            403 question limit reached
    """
    token = extract_session_token(request, auth_settings)
    try:
        return await create_question_use_case.execute(
            CreateQuestionRequest(
                token=token,
                course_id=body.course_id,
                title=body.title,
                topics=body.topics,
                urls=body.urls,
                difficulty=body.difficulty,
            )
        )
    except Exception as e:
        raise error_response(e, "Failed to create question") from e


@router.delete("/{question_id}", response_model=DeleteQuestionResponse)
async def delete_question(
    question_id: UUID,
    request: Request,
    delete_question_use_case: FromDishka[DeleteQuestionUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> DeleteQuestionResponse:
    """Remove a question from the caller's courses.

    The question itself is deleted once no course contains it.

    Raises:
        HTTPException: 401 unauthenticated, 404 unknown user or question,
            403 question is not in any of the caller's courses
    """
    token = extract_session_token(request, auth_settings)
    try:
        return await delete_question_use_case.execute(
            DeleteQuestionRequest(token=token, question_id=question_id)
        )
    except Exception as e:
        raise error_response(e, "Failed to delete question") from e


@router.post("/{question_id}/bookmark", response_model=BookmarkResponse)
async def add_bookmark(
    question_id: UUID,
    request: Request,
    add_bookmark_use_case: FromDishka[AddBookmarkUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> BookmarkResponse:
    """Bookmark a question (no-op when already bookmarked)."""
    token = extract_session_token(request, auth_settings)
    try:
        return await add_bookmark_use_case.execute(
            AddBookmarkRequest(token=token, question_id=question_id)
        )
    except Exception as e:
        raise error_response(e, "Failed to bookmark question") from e


@router.delete("/{question_id}/bookmark", response_model=BookmarkResponse)
async def remove_bookmark(
    question_id: UUID,
    request: Request,
    remove_bookmark_use_case: FromDishka[RemoveBookmarkUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> BookmarkResponse:
    """Remove a bookmark."""
    token = extract_session_token(request, auth_settings)
    try:
        return await remove_bookmark_use_case.execute(
            RemoveBookmarkRequest(token=token, question_id=question_id)
        )
    except Exception as e:
        raise error_response(e, "Failed to remove bookmark") from e


@router.post("/{question_id}/solve", response_model=MarkSolvedResponse)
async def mark_solved(
    question_id: UUID,
    request: Request,
    mark_solved_use_case: FromDishka[MarkSolvedUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> MarkSolvedResponse:
    """Mark a question solved (re-solving refreshes the timestamp)."""
    token = extract_session_token(request, auth_settings)
    try:
        return await mark_solved_use_case.execute(
            MarkSolvedRequest(token=token, question_id=question_id)
        )
    except Exception as e:
        raise error_response(e, "Failed to mark question as solved") from e


@router.delete("/{question_id}/solve", response_model=UnmarkSolvedResponse)
async def unmark_solved(
    question_id: UUID,
    request: Request,
    unmark_solved_use_case: FromDishka[UnmarkSolvedUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> UnmarkSolvedResponse:
    """Remove a solved mark (200 even when the question was not solved)."""
    token = extract_session_token(request, auth_settings)
    try:
        return await unmark_solved_use_case.execute(
            UnmarkSolvedRequest(token=token, question_id=question_id)
        )
    except Exception as e:
        raise error_response(e, "Failed to unmark question") from e
