"""Question domain service."""

from datetime import datetime, timezone
from typing import Sequence
from uuid import uuid4

import logfire

from prep.domain.error import ConflictError, NotAuthorizedError, NotFoundError
from prep.domain.model import Course, Question
from prep.domain.repository import QuestionRepository
from prep.domain.value import CourseId, Difficulty, QuestionId


class QuestionService:
    """Domain service for question operations."""

    def __init__(self, question_repository: QuestionRepository) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
        """
        self.question_repository = question_repository

    async def get_question(self, question_id: QuestionId) -> Question:
        """Get a question by ID.

        Raises:
            NotFoundError: If question not found
        """
        question = await self.question_repository.find_by_id(question_id)
        if not question:
            logfire.warn("Question not found", question_id=str(question_id))
            raise NotFoundError("Question", str(question_id))
        return question

    async def list_all(self) -> list[Question]:
        """List every question."""
        return await self.question_repository.find_all()

    async def list_for_courses(self, course_ids: Sequence[CourseId]) -> list[Question]:
        """List questions linked to any of the given courses."""
        return await self.question_repository.find_by_course_ids(course_ids)

    async def create_question(
        self,
        course: Course,
        title: str,
        topics: list[str],
        urls: list[str],
        difficulty: Difficulty,
    ) -> Question:
        """Create a question inside a course.

        Args:
            course: Course the question is added to
            title: Question title
            topics: Topic names
            urls: Problem URLs
            difficulty: Difficulty

        Returns:
            Created question
        """
        with logfire.span(
            "question_service.create_question", course_id=str(course.id), title=title
        ):
            now = datetime.now(timezone.utc)
            question = Question(
                id=QuestionId(uuid4()),
                title=title,
                topics=topics,
                urls=urls,
                difficulty=difficulty,
                course_ids=[course.id],
                created_at=now,
                updated_at=now,
            )
            saved = await self.question_repository.save(question)
            logfire.info("Question created", question_id=str(saved.id))
            return saved

    async def ensure_title_unused(self, course: Course, title: str) -> None:
        """Check no question in the course already has this title.

        Raises:
            ConflictError: If the title is taken within the course
        """
        questions = await self.question_repository.find_by_course_ids([course.id])
        if any(question.title == title for question in questions):
            raise ConflictError(
                f"A question with this title already exists in {course.title}"
            )

    async def update_question(
        self,
        question: Question,
        title: str | None = None,
        topics: list[str] | None = None,
        urls: list[str] | None = None,
        difficulty: Difficulty | None = None,
    ) -> Question:
        """Apply the given field changes to a question.

        Fields left as None keep their current value.

        Returns:
            Updated question
        """
        changes = {
            field: value
            for field, value in {
                "title": title,
                "topics": topics,
                "urls": urls,
                "difficulty": difficulty,
            }.items()
            if value is not None
        }
        with logfire.span(
            "question_service.update_question",
            question_id=str(question.id),
            fields=sorted(changes),
        ):
            updated = Question.model_validate(
                {
                    **question.model_dump(),
                    **changes,
                    "updated_at": datetime.now(timezone.utc),
                }
            )
            saved = await self.question_repository.update(updated)
            logfire.info("Question updated", question_id=str(saved.id))
            return saved

    async def remove_from_courses(
        self, question: Question, owned_courses: Sequence[Course]
    ) -> bool:
        """Unlink a question from the given courses.

        The question row is deleted once no course links it anymore.

        Args:
            question: Question to unlink
            owned_courses: Courses to unlink it from

        Returns:
            True if the question itself was deleted

        Raises:
            NotAuthorizedError: If owned_courses is empty
        """
        if not owned_courses:
            raise NotAuthorizedError(
                "You can only delete questions from your own courses"
            )

        with logfire.span(
            "question_service.remove_from_courses",
            question_id=str(question.id),
            course_count=len(owned_courses),
        ):
            for course in owned_courses:
                await self.question_repository.unlink_course(question.id, course.id)

            removed_ids = {course.id for course in owned_courses}
            remaining = [cid for cid in question.course_ids if cid not in removed_ids]
            if remaining:
                logfire.info(
                    "Question kept for other courses",
                    question_id=str(question.id),
                    remaining=len(remaining),
                )
                return False

            await self.question_repository.delete(question.id)
            logfire.info("Question deleted", question_id=str(question.id))
            return True
