"""Unit tests for admin use cases."""

import pytest
import pytest_asyncio

from prep.application.usecase.admin import (
    AdminGuard,
    CreateDefaultCourseRequest,
    CreateDefaultCourseUseCase,
    CreateDefaultQuestionRequest,
    CreateDefaultQuestionUseCase,
    ListDefaultQuestionsRequest,
    ListDefaultQuestionsUseCase,
    RemoveDefaultQuestionRequest,
    RemoveDefaultQuestionUseCase,
    UpdateDefaultQuestionRequest,
    UpdateDefaultQuestionUseCase,
)
from prep.application.usecase.course import CreateCourseRequest, CreateCourseUseCase
from prep.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
)
from prep.config import AuthSettings
from prep.domain.error import (
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    UnauthenticatedError,
)
from prep.domain.service import IdentityProviderClient
from prep.domain.value import Difficulty
from prep.persistence.repository.inmemory import InMemoryStore
from tests.conftest import make_session_token
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

ADMIN_EMAIL = "admin@prep.example.com"


@pytest_asyncio.fixture
async def admin_token(unit_env) -> str:
    auth_settings = await unit_env.get(AuthSettings)
    auth_settings.admin_emails = [ADMIN_EMAIL]
    identity_client = await unit_env.get(IdentityProviderClient)
    identity_client.register("ext_admin", ADMIN_EMAIL)
    return make_session_token("ext_admin")


async def add_default_course(unit_env, token: str, title: str = "Blind 75"):
    use_case = await unit_env.get(CreateDefaultCourseUseCase)
    return await use_case.execute(CreateDefaultCourseRequest(token=token, title=title))


async def add_default_question(unit_env, token: str, title: str = "Two Sum"):
    use_case = await unit_env.get(CreateDefaultQuestionUseCase)
    return await use_case.execute(
        CreateDefaultQuestionRequest(
            token=token,
            title=title,
            topics=["Array"],
            urls=["https://leetcode.com/problems/two-sum/", "  "],
            difficulty=Difficulty.EASY,
        )
    )


class TestAdminGuard:
    """Tests for AdminGuard."""

    @pytest.mark.asyncio
    async def test_email_match_ignores_case_and_whitespace(self, unit_env):
        # Arrange
        auth_settings = await unit_env.get(AuthSettings)
        auth_settings.admin_emails = [" Admin@Prep.Example.com "]
        identity_client = await unit_env.get(IdentityProviderClient)
        identity_client.register("ext_admin", "admin@prep.example.com")
        guard = await unit_env.get(AdminGuard)

        # Act
        identity = await guard.require_admin(make_session_token("ext_admin"))

        # Assert
        assert identity.external_id.root == "ext_admin"

    @pytest.mark.asyncio
    async def test_non_admin_is_refused(self, unit_env, admin_token):
        identity_client = await unit_env.get(IdentityProviderClient)
        identity_client.register("ext_user", "user@example.com")
        guard = await unit_env.get(AdminGuard)

        with pytest.raises(NotAuthorizedError):
            await guard.require_admin(make_session_token("ext_user"))

    @pytest.mark.asyncio
    async def test_empty_allowlist_admits_nobody(self, unit_env):
        identity_client = await unit_env.get(IdentityProviderClient)
        identity_client.register("ext_admin", ADMIN_EMAIL)
        guard = await unit_env.get(AdminGuard)

        with pytest.raises(NotAuthorizedError):
            await guard.require_admin(make_session_token("ext_admin"))

    @pytest.mark.asyncio
    async def test_anonymous_caller_is_unauthenticated(self, unit_env, admin_token):
        guard = await unit_env.get(AdminGuard)

        with pytest.raises(UnauthenticatedError):
            await guard.require_admin(None)


class TestDefaultCourseAdmin:
    """Tests for creating and listing the default course."""

    @pytest.mark.asyncio
    async def test_create_default_course(self, unit_env, admin_token):
        # Act
        course = await add_default_course(unit_env, admin_token, " Blind 75 ")

        # Assert
        assert course.title == "Blind 75"
        assert course.is_default
        assert course.user_id is None

    @pytest.mark.asyncio
    async def test_duplicate_default_course_conflicts(self, unit_env, admin_token):
        await add_default_course(unit_env, admin_token)

        with pytest.raises(ConflictError):
            await add_default_course(unit_env, admin_token)

    @pytest.mark.asyncio
    async def test_list_without_default_course_raises(self, unit_env, admin_token):
        use_case = await unit_env.get(ListDefaultQuestionsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(ListDefaultQuestionsRequest(token=admin_token))

    @pytest.mark.asyncio
    async def test_list_is_newest_first(self, unit_env, admin_token):
        # Arrange
        await add_default_course(unit_env, admin_token)
        first = await add_default_question(unit_env, admin_token, "Two Sum")
        second = await add_default_question(unit_env, admin_token, "Valid Anagram")
        use_case = await unit_env.get(ListDefaultQuestionsUseCase)

        # Act
        result = await use_case.execute(ListDefaultQuestionsRequest(token=admin_token))

        # Assert
        assert [q.id for q in result.questions] == [second.id, first.id]
        assert result.questions_count == 2
        assert result.course.question_count == 2


class TestDefaultQuestionAdmin:
    """Tests for editing the default course's questions."""

    @pytest.mark.asyncio
    async def test_create_drops_blank_urls(self, unit_env, admin_token):
        course = await add_default_course(unit_env, admin_token)

        question = await add_default_question(unit_env, admin_token)

        assert question.urls == ["https://leetcode.com/problems/two-sum/"]
        assert question.course_ids == [course.id]

    @pytest.mark.asyncio
    async def test_create_without_default_course_raises(self, unit_env, admin_token):
        with pytest.raises(NotFoundError):
            await add_default_question(unit_env, admin_token)

    @pytest.mark.asyncio
    async def test_duplicate_question_title_conflicts(self, unit_env, admin_token):
        await add_default_course(unit_env, admin_token)
        await add_default_question(unit_env, admin_token)

        with pytest.raises(ConflictError):
            await add_default_question(unit_env, admin_token)

    @pytest.mark.asyncio
    async def test_update_question(self, unit_env, admin_token):
        # Arrange
        await add_default_course(unit_env, admin_token)
        question = await add_default_question(unit_env, admin_token)
        use_case = await unit_env.get(UpdateDefaultQuestionUseCase)

        # Act
        updated = await use_case.execute(
            UpdateDefaultQuestionRequest(
                token=admin_token,
                question_id=question.id,
                title="Two Sum II",
                difficulty=Difficulty.MEDIUM,
            )
        )

        # Assert
        assert updated.title == "Two Sum II"
        assert updated.difficulty == Difficulty.MEDIUM
        assert updated.topics == ["Array"]

    @pytest.mark.asyncio
    async def test_update_question_outside_default_course(self, unit_env, admin_token):
        """Questions in user courses should be invisible to admin edits."""
        # Arrange
        await add_default_course(unit_env, admin_token)
        identity_client = await unit_env.get(IdentityProviderClient)
        identity_client.register("ext_user", "user@example.com")
        user_token = make_session_token("ext_user")
        create_course = await unit_env.get(CreateCourseUseCase)
        course = await create_course.execute(
            CreateCourseRequest(token=user_token, title="Mine")
        )
        create_question = await unit_env.get(CreateQuestionUseCase)
        question = await create_question.execute(
            CreateQuestionRequest(
                token=user_token,
                course_id=course.id,
                title="Two Sum",
                difficulty=Difficulty.EASY,
            )
        )
        use_case = await unit_env.get(UpdateDefaultQuestionUseCase)

        # Act / Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateDefaultQuestionRequest(
                    token=admin_token, question_id=question.id, title="Renamed"
                )
            )

    @pytest.mark.asyncio
    async def test_remove_question_deletes_it(self, unit_env, admin_token):
        # Arrange
        store = await unit_env.get(InMemoryStore)
        course = await add_default_course(unit_env, admin_token)
        question = await add_default_question(unit_env, admin_token)
        use_case = await unit_env.get(RemoveDefaultQuestionUseCase)

        # Act
        result = await use_case.execute(
            RemoveDefaultQuestionRequest(token=admin_token, question_id=question.id)
        )

        # Assert
        assert result.message == "Question removed successfully"
        assert result.deleted is True
        assert store.questions == {}
        assert next(iter(store.courses.values())).id == course.id
        assert next(iter(store.courses.values())).question_count == 0
