"""Shared state for in-memory repositories."""

import asyncio
from dataclasses import dataclass, field

from prep.domain.model import Course, Question, SolvedQuestion, User
from prep.domain.value import CourseId, QuestionId, UserId


@dataclass
class InMemoryStore:
    """Tables backing the in-memory repositories.

    One store is shared by all repositories of a container so that writes
    from one request are visible to the next, like a database.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    courses: dict[CourseId, Course] = field(default_factory=dict)
    questions: dict[QuestionId, Question] = field(default_factory=dict)
    solved: dict[tuple[UserId, QuestionId], SolvedQuestion] = field(
        default_factory=dict
    )
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
