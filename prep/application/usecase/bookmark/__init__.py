"""Bookmark use cases."""

from .add_bookmark import AddBookmarkRequest, AddBookmarkUseCase, BookmarkResponse
from .list_bookmarks import (
    ListBookmarksRequest,
    ListBookmarksResponse,
    ListBookmarksUseCase,
)
from .remove_bookmark import RemoveBookmarkRequest, RemoveBookmarkUseCase

__all__ = [
    "AddBookmarkRequest",
    "AddBookmarkUseCase",
    "BookmarkResponse",
    "ListBookmarksRequest",
    "ListBookmarksResponse",
    "ListBookmarksUseCase",
    "RemoveBookmarkRequest",
    "RemoveBookmarkUseCase",
]
