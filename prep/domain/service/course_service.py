"""Course domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from prep.config import LimitsSettings
from prep.domain.error import (
    ConflictError,
    LimitExceededError,
    NotAuthorizedError,
    NotFoundError,
)
from prep.domain.model import Course, User
from prep.domain.repository import CourseRepository
from prep.domain.value import CourseId, UserId


UNLIMITED = -1


class CourseService:
    """Domain service for course operations."""

    def __init__(
        self, course_repository: CourseRepository, limits: LimitsSettings
    ) -> None:
        """Initialize course service.

        Args:
            course_repository: Course repository
            limits: Per-user content limits
        """
        self.course_repository = course_repository
        self.limits = limits

    async def get_course(self, course_id: CourseId) -> Course:
        """Get a course by ID.

        Raises:
            NotFoundError: If course not found
        """
        course = await self.course_repository.find_by_id(course_id)
        if not course:
            logfire.warn("Course not found", course_id=str(course_id))
            raise NotFoundError("Course", str(course_id))
        return course

    async def list_visible(self, user_id: UserId | None) -> list[Course]:
        """List default courses plus the user's own courses.

        Args:
            user_id: Local user, None for anonymous callers

        Returns:
            Courses visible to the caller
        """
        with logfire.span(
            "course_service.list_visible",
            user_id=str(user_id) if user_id else None,
        ):
            courses = await self.course_repository.find_visible_to(user_id)
            logfire.info("Courses listed", count=len(courses))
            return courses

    async def list_owned(self, user_id: UserId) -> list[Course]:
        """List the user's own courses, newest first."""
        return await self.course_repository.find_owned_by(user_id)

    async def courses_remaining(self, user_id: UserId) -> tuple[int, int]:
        """Count used and remaining course slots.

        Returns:
            (courses_used, courses_remaining), remaining is -1 when unlimited
        """
        used = await self.course_repository.count_owned_by(user_id)
        if self.limits.max_courses == UNLIMITED:
            return used, UNLIMITED
        return used, max(0, self.limits.max_courses - used)

    async def create_course(self, owner: User, title: str) -> Course:
        """Create a user course.

        Args:
            owner: Course owner
            title: Course title

        Returns:
            Created course

        Raises:
            LimitExceededError: If the owner reached max_courses
        """
        with logfire.span(
            "course_service.create_course", user_id=str(owner.id), title=title
        ):
            _, remaining = await self.courses_remaining(owner.id)
            if remaining == 0:
                logfire.warn("Course limit reached", user_id=str(owner.id))
                raise LimitExceededError(
                    f"You've reached your limit of {self.limits.max_courses} courses"
                )

            now = datetime.now(timezone.utc)
            course = Course(
                id=CourseId(uuid4()),
                title=title,
                user_id=owner.id,
                is_default=False,
                question_count=0,
                created_at=now,
                updated_at=now,
            )
            saved = await self.course_repository.save(course)
            logfire.info("Course created", course_id=str(saved.id))
            return saved

    async def get_default_course(self) -> Course:
        """The course admins curate, the oldest default when there are several.

        Raises:
            NotFoundError: If no default course exists yet
        """
        defaults = await self.course_repository.find_defaults()
        if not defaults:
            logfire.warn("Default course missing")
            raise NotFoundError("Course", "default")
        return defaults[0]

    async def create_default_course(self, title: str) -> Course:
        """Create a shared default course with no owner.

        Args:
            title: Course title, unique among default courses

        Returns:
            Created course

        Raises:
            ConflictError: If a default course already has this title
        """
        with logfire.span("course_service.create_default_course", title=title):
            defaults = await self.course_repository.find_defaults()
            if any(course.title == title for course in defaults):
                raise ConflictError("A default course with this title already exists")

            now = datetime.now(timezone.utc)
            course = Course(
                id=CourseId(uuid4()),
                title=title,
                user_id=None,
                is_default=True,
                question_count=0,
                created_at=now,
                updated_at=now,
            )
            saved = await self.course_repository.save(course)
            logfire.info("Default course created", course_id=str(saved.id))
            return saved

    async def delete_course(self, owner: User, course_id: CourseId) -> Course:
        """Delete a user course.

        Args:
            owner: User requesting the deletion
            course_id: Course to delete

        Returns:
            The deleted course

        Raises:
            NotFoundError: If course not found
            NotAuthorizedError: If course is default or owned by someone else
        """
        with logfire.span(
            "course_service.delete_course",
            user_id=str(owner.id),
            course_id=str(course_id),
        ):
            course = await self.get_course(course_id)

            if course.is_default:
                raise NotAuthorizedError("Cannot delete default courses")
            if course.user_id != owner.id:
                raise NotAuthorizedError("You can only delete your own courses")

            await self.course_repository.delete(course_id)
            logfire.info(
                "Course deleted",
                course_id=str(course_id),
                question_count=course.question_count,
            )
            return course

    def ensure_question_capacity(self, course: Course) -> None:
        """Check the course can take one more question.

        Raises:
            LimitExceededError: If the course reached max_questions_per_course
        """
        limit = self.limits.max_questions_per_course
        if limit != UNLIMITED and course.question_count >= limit:
            raise LimitExceededError(
                f"You've reached your limit of {limit} questions per course"
            )

    async def increment_question_count(self, course_id: CourseId) -> None:
        """Atomically increment the course's question count."""
        await self.course_repository.increment_question_count(course_id)

    async def decrement_question_count(self, course_id: CourseId) -> None:
        """Atomically decrement the course's question count."""
        await self.course_repository.decrement_question_count(course_id)

    async def find_owned_among(
        self, owner_id: UserId, course_ids: list[CourseId]
    ) -> list[Course]:
        """Courses from course_ids that are user courses owned by owner_id."""
        owned = []
        for course_id in course_ids:
            course = await self.course_repository.find_by_id(course_id)
            if course and course.is_owned_by(owner_id):
                owned.append(course)
        return owned

    async def get_owned_course(self, owner_id: UserId, course_id: CourseId) -> Course:
        """Get a user course owned by owner_id.

        Raises:
            NotFoundError: If the course is missing, default or someone else's
        """
        course = await self.course_repository.find_by_id(course_id)
        if not course or not course.is_owned_by(owner_id):
            raise NotFoundError("Course", str(course_id))
        return course
