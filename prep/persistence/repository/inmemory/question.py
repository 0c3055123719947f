"""In-memory question repository for testing."""

from typing import Optional, Sequence

from prep.domain.model.question import Question
from prep.domain.repository.question import QuestionRepository
from prep.domain.value import CourseId, QuestionId

from .store import InMemoryStore


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _questions(self) -> dict[QuestionId, Question]:
        return self._store.questions

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    async def find_all(self) -> list[Question]:
        """Find all questions, oldest first."""
        return sorted(self._questions.values(), key=lambda q: q.created_at)

    async def find_by_course_ids(
        self, course_ids: Sequence[CourseId]
    ) -> list[Question]:
        """Find questions linked to any of the given courses."""
        wanted = set(course_ids)
        matching = [
            q for q in self._questions.values() if wanted.intersection(q.course_ids)
        ]
        return sorted(matching, key=lambda q: q.created_at)

    async def save(self, question: Question) -> Question:
        """Save a question with its course links."""
        self._questions[question.id] = question
        return question

    async def update(self, question: Question) -> Question:
        """Replace a question's fields, keeping its stored course links."""
        stored = self._questions[question.id]
        updated = question.model_copy(update={"course_ids": stored.course_ids})
        self._questions[question.id] = updated
        return updated

    async def unlink_course(self, question_id: QuestionId, course_id: CourseId) -> None:
        """Remove the link between a question and a course."""
        question = self._questions.get(question_id)
        if question:
            self._questions[question_id] = question.model_copy(
                update={
                    "course_ids": [
                        cid for cid in question.course_ids if cid != course_id
                    ]
                }
            )

    async def delete(self, question_id: QuestionId) -> None:
        """Delete a question and its solved marks."""
        self._questions.pop(question_id, None)
        for key in [k for k in self._store.solved if k[1] == question_id]:
            del self._store.solved[key]
