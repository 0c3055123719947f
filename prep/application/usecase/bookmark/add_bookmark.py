"""Add bookmark use case."""

from uuid import UUID

from pydantic import BaseModel

from prep.application.usecase.caller import CallerResolver
from prep.domain.service import QuestionService, UserService
from prep.domain.value import QuestionId


class AddBookmarkRequest(BaseModel):
    """Add bookmark request."""

    token: str | None
    question_id: UUID


class BookmarkResponse(BaseModel):
    """Bookmark mutation response."""

    message: str
    is_bookmarked: bool
    bookmarked_question_ids: list[UUID]


class AddBookmarkUseCase:
    """Use case for bookmarking a question."""

    def __init__(
        self,
        caller_resolver: CallerResolver,
        user_service: UserService,
        question_service: QuestionService,
    ) -> None:
        """Initialize add bookmark use case.

        Args:
            caller_resolver: Session token resolver
            user_service: User domain service
            question_service: Question domain service
        """
        self.caller_resolver = caller_resolver
        self.user_service = user_service
        self.question_service = question_service

    async def execute(self, request: AddBookmarkRequest) -> BookmarkResponse:
        """Execute add bookmark flow.

        Bookmarking an already bookmarked question is a no-op.

        Raises:
            UnauthenticatedError: If the token is missing or invalid
            NotFoundError: If the caller or question does not exist
        """
        user = await self.caller_resolver.require_user(request.token)
        question = await self.question_service.get_question(
            QuestionId(request.question_id)
        )

        if user.has_bookmarked(question.id):
            return BookmarkResponse(
                message="Question already bookmarked",
                is_bookmarked=True,
                bookmarked_question_ids=list(user.bookmarked_question_ids),
            )

        bookmarks = await self.user_service.add_bookmark(user.id, question.id)
        return BookmarkResponse(
            message="Question bookmarked successfully",
            is_bookmarked=True,
            bookmarked_question_ids=list(bookmarks),
        )
