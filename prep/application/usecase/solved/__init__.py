"""Solved question use cases."""

from .list_solved import (
    ListSolvedRequest,
    ListSolvedResponse,
    ListSolvedUseCase,
    SolvedQuestionEntry,
)
from .mark_solved import MarkSolvedRequest, MarkSolvedResponse, MarkSolvedUseCase
from .unmark_solved import (
    UnmarkSolvedRequest,
    UnmarkSolvedResponse,
    UnmarkSolvedUseCase,
)

__all__ = [
    "ListSolvedRequest",
    "ListSolvedResponse",
    "ListSolvedUseCase",
    "MarkSolvedRequest",
    "MarkSolvedResponse",
    "MarkSolvedUseCase",
    "SolvedQuestionEntry",
    "UnmarkSolvedRequest",
    "UnmarkSolvedResponse",
    "UnmarkSolvedUseCase",
]
