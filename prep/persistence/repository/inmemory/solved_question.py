"""In-memory solved question repository for testing."""

from datetime import datetime
from uuid import uuid4

from prep.domain.model.solved_question import SolvedQuestion
from prep.domain.repository.solved_question import SolvedQuestionRepository
from prep.domain.value import CourseId, QuestionId, SolvedQuestionId, UserId

from .store import InMemoryStore


class InMemorySolvedQuestionRepository(SolvedQuestionRepository):
    """In-memory implementation of SolvedQuestionRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def upsert(
        self, user_id: UserId, question_id: QuestionId, solved_at: datetime
    ) -> SolvedQuestion:
        """Mark a question solved, refreshing solved_at if already marked."""
        key = (user_id, question_id)
        existing = self._store.solved.get(key)
        if existing:
            solved = existing.model_copy(update={"solved_at": solved_at})
        else:
            solved = SolvedQuestion(
                id=SolvedQuestionId(uuid4()),
                user_id=user_id,
                question_id=question_id,
                solved_at=solved_at,
            )
        self._store.solved[key] = solved
        return solved

    async def delete(self, user_id: UserId, question_id: QuestionId) -> bool:
        """Remove a solved mark."""
        return self._store.solved.pop((user_id, question_id), None) is not None

    async def find_by_user(
        self, user_id: UserId, course_id: CourseId | None = None
    ) -> list[SolvedQuestion]:
        """Find a user's solved marks, newest first."""
        marks = [s for s in self._store.solved.values() if s.user_id == user_id]
        if course_id is not None:
            marks = [
                s
                for s in marks
                if s.question_id in self._store.questions
                and course_id in self._store.questions[s.question_id].course_ids
            ]
        return sorted(marks, key=lambda s: s.solved_at, reverse=True)

    async def find_question_ids_by_user(self, user_id: UserId) -> set[QuestionId]:
        """Find the ids of all questions the user has solved."""
        return {s.question_id for s in self._store.solved.values() if s.user_id == user_id}
