"""Unit tests for CourseService."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from prep.config import LimitsSettings
from prep.domain.error import (
    ConflictError,
    LimitExceededError,
    NotAuthorizedError,
    NotFoundError,
)
from prep.domain.model import Course, User
from prep.domain.service import CourseService
from prep.domain.value import CourseId, UserId
from prep.domain.value.types import ExternalId
from prep.persistence.repository.inmemory import InMemoryCourseRepository


def make_user(external_id: str = "ext_owner") -> User:
    return User(id=UserId(uuid4()), external_id=ExternalId(external_id))


def make_default_course(title: str = "Blind 75 Essentials") -> Course:
    return Course(
        id=CourseId(uuid4()),
        title=title,
        user_id=None,
        is_default=True,
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


class TestCreateCourse:
    """Tests for CourseService.create_course()."""

    @pytest.mark.asyncio
    async def test_creates_owned_course(self):
        """Should create an empty user course."""
        # Arrange
        service = CourseService(InMemoryCourseRepository(), LimitsSettings())
        owner = make_user()

        # Act
        course = await service.create_course(owner, "Graphs")

        # Assert
        assert course.title == "Graphs"
        assert course.user_id == owner.id
        assert course.is_default is False
        assert course.question_count == 0

    @pytest.mark.asyncio
    async def test_rejects_course_over_limit(self):
        """Should raise LimitExceededError once max_courses is reached."""
        # Arrange
        service = CourseService(
            InMemoryCourseRepository(), LimitsSettings(max_courses=1)
        )
        owner = make_user()
        await service.create_course(owner, "First")

        # Act / Assert
        with pytest.raises(LimitExceededError, match="limit of 1 courses"):
            await service.create_course(owner, "Second")

    @pytest.mark.asyncio
    async def test_unlimited_courses(self):
        """Should report unlimited remaining courses with the default limits."""
        # Arrange
        service = CourseService(InMemoryCourseRepository(), LimitsSettings())
        owner = make_user()
        await service.create_course(owner, "First")

        # Act
        used, remaining = await service.courses_remaining(owner.id)

        # Assert
        assert used == 1
        assert remaining == -1


class TestListVisible:
    """Tests for CourseService.list_visible()."""

    @pytest.mark.asyncio
    async def test_anonymous_sees_only_default_courses(self):
        """Anonymous callers should only see default courses."""
        # Arrange
        repo = InMemoryCourseRepository()
        service = CourseService(repo, LimitsSettings())
        default = await repo.save(make_default_course())
        await service.create_course(make_user(), "Private")

        # Act
        courses = await service.list_visible(None)

        # Assert
        assert [c.id for c in courses] == [default.id]

    @pytest.mark.asyncio
    async def test_user_sees_default_then_own_courses(self):
        """Default courses should come first, followed by the caller's courses."""
        # Arrange
        repo = InMemoryCourseRepository()
        service = CourseService(repo, LimitsSettings())
        owner = make_user()
        other = make_user("ext_other")
        own = await service.create_course(owner, "Mine")
        await service.create_course(other, "Theirs")
        default = await repo.save(make_default_course())

        # Act
        courses = await service.list_visible(owner.id)

        # Assert
        assert [c.id for c in courses] == [default.id, own.id]


class TestDeleteCourse:
    """Tests for CourseService.delete_course()."""

    @pytest.mark.asyncio
    async def test_deletes_own_course(self):
        """Should delete a course owned by the caller."""
        # Arrange
        repo = InMemoryCourseRepository()
        service = CourseService(repo, LimitsSettings())
        owner = make_user()
        course = await service.create_course(owner, "Mine")

        # Act
        deleted = await service.delete_course(owner, course.id)

        # Assert
        assert deleted.id == course.id
        assert await repo.find_by_id(course.id) is None

    @pytest.mark.asyncio
    async def test_cannot_delete_default_course(self):
        """Should refuse to delete default courses."""
        # Arrange
        repo = InMemoryCourseRepository()
        service = CourseService(repo, LimitsSettings())
        default = await repo.save(make_default_course())

        # Act / Assert
        with pytest.raises(NotAuthorizedError, match="default"):
            await service.delete_course(make_user(), default.id)

    @pytest.mark.asyncio
    async def test_cannot_delete_someone_elses_course(self):
        """Should refuse to delete another user's course."""
        # Arrange
        service = CourseService(InMemoryCourseRepository(), LimitsSettings())
        course = await service.create_course(make_user(), "Theirs")

        # Act / Assert
        with pytest.raises(NotAuthorizedError, match="your own courses"):
            await service.delete_course(make_user("ext_intruder"), course.id)

    @pytest.mark.asyncio
    async def test_missing_course_raises_not_found(self):
        """Should raise NotFoundError for an unknown course."""
        service = CourseService(InMemoryCourseRepository(), LimitsSettings())

        with pytest.raises(NotFoundError):
            await service.delete_course(make_user(), CourseId(uuid4()))


class TestQuestionCapacity:
    """Tests for per-course question limits."""

    def test_capacity_ok_below_limit(self):
        """Should accept a question while below the limit."""
        service = CourseService(
            InMemoryCourseRepository(), LimitsSettings(max_questions_per_course=2)
        )
        course = make_default_course().model_copy(update={"question_count": 1})

        service.ensure_question_capacity(course)

    def test_capacity_exceeded_at_limit(self):
        """Should raise LimitExceededError at the limit."""
        service = CourseService(
            InMemoryCourseRepository(), LimitsSettings(max_questions_per_course=2)
        )
        course = make_default_course().model_copy(update={"question_count": 2})

        with pytest.raises(LimitExceededError):
            service.ensure_question_capacity(course)

    @pytest.mark.asyncio
    async def test_get_owned_course_hides_default_courses(self):
        """Default courses should not count as owned by anyone."""
        repo = InMemoryCourseRepository()
        service = CourseService(repo, LimitsSettings())
        default = await repo.save(make_default_course())

        with pytest.raises(NotFoundError):
            await service.get_owned_course(make_user().id, default.id)


class TestDefaultCourses:
    """Tests for the admin-curated default course."""

    @pytest.mark.asyncio
    async def test_create_default_course_has_no_owner(self):
        service = CourseService(InMemoryCourseRepository(), LimitsSettings())

        course = await service.create_default_course("Blind 75 Essentials")

        assert course.is_default
        assert course.user_id is None
        assert course.question_count == 0

    @pytest.mark.asyncio
    async def test_duplicate_default_title_conflicts(self):
        service = CourseService(InMemoryCourseRepository(), LimitsSettings())
        await service.create_default_course("Blind 75 Essentials")

        with pytest.raises(ConflictError):
            await service.create_default_course("Blind 75 Essentials")

    @pytest.mark.asyncio
    async def test_default_course_is_the_oldest(self):
        """Should pick the earliest default course and ignore user courses."""
        repo = InMemoryCourseRepository()
        service = CourseService(repo, LimitsSettings())
        newer = make_default_course("Newer").model_copy(
            update={"created_at": datetime(2024, 6, 1, tzinfo=timezone.utc)}
        )
        await repo.save(newer)
        oldest = await repo.save(make_default_course("Oldest"))
        await service.create_course(make_user(), "Mine")

        course = await service.get_default_course()

        assert course.id == oldest.id

    @pytest.mark.asyncio
    async def test_missing_default_course_raises_not_found(self):
        service = CourseService(InMemoryCourseRepository(), LimitsSettings())

        with pytest.raises(NotFoundError):
            await service.get_default_course()
