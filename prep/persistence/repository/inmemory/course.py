"""In-memory course repository for testing."""

from typing import Optional

from prep.domain.model.course import Course
from prep.domain.repository.course import CourseRepository
from prep.domain.value import CourseId, UserId

from .store import InMemoryStore


class InMemoryCourseRepository(CourseRepository):
    """In-memory implementation of CourseRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _courses(self) -> dict[CourseId, Course]:
        return self._store.courses

    async def find_by_id(self, course_id: CourseId) -> Optional[Course]:
        """Find a course by ID."""
        return self._courses.get(course_id)

    async def find_visible_to(self, user_id: UserId | None) -> list[Course]:
        """Find default courses plus the user's own courses."""
        visible = [
            c
            for c in self._courses.values()
            if c.is_default or (user_id is not None and c.user_id == user_id)
        ]
        return sorted(visible, key=lambda c: (not c.is_default, c.created_at))

    async def find_defaults(self) -> list[Course]:
        """Find the default courses, oldest first."""
        defaults = [c for c in self._courses.values() if c.is_default]
        return sorted(defaults, key=lambda c: c.created_at)

    async def find_owned_by(self, user_id: UserId) -> list[Course]:
        """Find the user's own courses, newest first."""
        owned = [c for c in self._courses.values() if c.is_owned_by(user_id)]
        return sorted(owned, key=lambda c: c.created_at, reverse=True)

    async def count_owned_by(self, user_id: UserId) -> int:
        """Count the user's own courses."""
        return len([c for c in self._courses.values() if c.is_owned_by(user_id)])

    async def save(self, course: Course) -> Course:
        """Save or update a course."""
        self._courses[course.id] = course
        return course

    async def delete(self, course_id: CourseId) -> None:
        """Delete a course and drop its question links."""
        self._courses.pop(course_id, None)
        for qid, question in list(self._store.questions.items()):
            if course_id in question.course_ids:
                self._store.questions[qid] = question.model_copy(
                    update={
                        "course_ids": [
                            cid for cid in question.course_ids if cid != course_id
                        ]
                    }
                )

    async def increment_question_count(self, course_id: CourseId) -> None:
        """Atomically increment course's question count by 1."""
        course = self._courses.get(course_id)
        if course:
            self._courses[course_id] = course.model_copy(
                update={"question_count": course.question_count + 1}
            )

    async def decrement_question_count(self, course_id: CourseId) -> None:
        """Atomically decrement course's question count by 1 (minimum 0)."""
        course = self._courses.get(course_id)
        if course:
            self._courses[course_id] = course.model_copy(
                update={"question_count": max(0, course.question_count - 1)}
            )
