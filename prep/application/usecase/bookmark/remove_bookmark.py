"""Remove bookmark use case."""

from uuid import UUID

from pydantic import BaseModel

from prep.application.usecase.bookmark.add_bookmark import BookmarkResponse
from prep.application.usecase.caller import CallerResolver
from prep.domain.service import UserService
from prep.domain.value import QuestionId


class RemoveBookmarkRequest(BaseModel):
    """Remove bookmark request."""

    token: str | None
    question_id: UUID


class RemoveBookmarkUseCase:
    """Use case for removing a bookmark."""

    def __init__(
        self, caller_resolver: CallerResolver, user_service: UserService
    ) -> None:
        """Initialize remove bookmark use case.

        Args:
            caller_resolver: Session token resolver
            user_service: User domain service
        """
        self.caller_resolver = caller_resolver
        self.user_service = user_service

    async def execute(self, request: RemoveBookmarkRequest) -> BookmarkResponse:
        """Execute remove bookmark flow (no error when not bookmarked).

        Raises:
            UnauthenticatedError: If the token is missing or invalid
            NotFoundError: If the caller was never synced
        """
        user = await self.caller_resolver.require_user(request.token)

        bookmarks = await self.user_service.remove_bookmark(
            user.id, QuestionId(request.question_id)
        )
        return BookmarkResponse(
            message="Bookmark removed successfully",
            is_bookmarked=False,
            bookmarked_question_ids=list(bookmarks),
        )
