"""List bookmarks use case."""

from uuid import UUID

from pydantic import BaseModel

from prep.application.usecase.caller import CallerResolver


class ListBookmarksRequest(BaseModel):
    """List bookmarks request."""

    token: str | None


class ListBookmarksResponse(BaseModel):
    """List bookmarks response."""

    bookmarked_question_ids: list[UUID]


class ListBookmarksUseCase:
    """Use case for listing the caller's bookmarks."""

    def __init__(self, caller_resolver: CallerResolver) -> None:
        self.caller_resolver = caller_resolver

    async def execute(self, request: ListBookmarksRequest) -> ListBookmarksResponse:
        """Execute list bookmarks flow."""
        user = await self.caller_resolver.require_user(request.token)
        return ListBookmarksResponse(
            bookmarked_question_ids=list(user.bookmarked_question_ids)
        )
