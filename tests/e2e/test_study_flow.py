"""End-to-end tests for courses, questions, bookmarks and solved marks."""

import pytest

from prep.domain.service import QuestionParser
from prep.domain.value import Difficulty, ParsedQuestion
from tests.conftest import auth_headers
from tests.harness import create_client_fixture

# E2E test fixture
api = create_client_fixture()


async def sync(client, external_id: str = "ext_123") -> dict:
    response = await client.post("/api/auth/sync-user", headers=auth_headers(external_id))
    assert response.status_code == 200
    return response.json()["user"]


class TestHealth:
    """Tests for the health endpoint."""

    @pytest.mark.asyncio
    async def test_health(self, api):
        client, _ = api

        response = await client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["session_verification"] == "shared-secret"


class TestStudyFlow:
    """A signed-in user builds a course and tracks progress."""

    @pytest.mark.asyncio
    async def test_course_question_bookmark_and_solve(self, api):
        """Should walk the main study flow."""
        client, _ = api
        headers = auth_headers("ext_123")
        await sync(client)

        # Create a course
        response = await client.post(
            "/api/courses", headers=headers, json={"title": "Arrays"}
        )
        assert response.status_code == 201
        course = response.json()
        assert course["question_count"] == 0

        # Add a question
        response = await client.post(
            "/api/questions",
            headers=headers,
            json={
                "title": "Two Sum",
                "topics": ["Array"],
                "urls": ["https://leetcode.com/problems/two-sum/"],
                "difficulty": "EASY",
                "course_id": course["id"],
            },
        )
        assert response.status_code == 201
        question = response.json()

        # Bookmark and solve it
        response = await client.post(
            f"/api/questions/{question['id']}/bookmark", headers=headers
        )
        assert response.status_code == 200
        assert response.json()["bookmarked_question_ids"] == [question["id"]]

        response = await client.post(
            f"/api/questions/{question['id']}/solve", headers=headers
        )
        assert response.status_code == 200

        # Courses carry solved flags
        response = await client.get("/api/courses", headers=headers)
        assert response.status_code == 200
        courses = response.json()
        assert [c["title"] for c in courses] == ["Arrays"]
        assert courses[0]["questions"][0]["is_solved"] is True

        # Profile reflects the activity
        response = await client.get("/api/users/me", headers=headers)
        assert response.status_code == 200
        me = response.json()
        assert me["total_courses_created"] == 1
        assert me["stats"]["total_questions_solved"] == 1
        assert me["stats"]["questions_bookmarked"] == 1
        assert me["stats"]["streak_days"] == 1

        response = await client.get(
            "/api/users/solved-questions",
            headers=headers,
            params={"course_id": course["id"]},
        )
        assert response.status_code == 200
        assert [s["question_id"] for s in response.json()] == [question["id"]]

        # Deleting the question cleans up after it
        response = await client.delete(
            f"/api/questions/{question['id']}", headers=headers
        )
        assert response.status_code == 200
        assert response.json()["question_deleted"] is True

        response = await client.get("/api/users/bookmarks", headers=headers)
        assert response.json()["bookmarked_question_ids"] == []

        # And the course can go too
        response = await client.delete(f"/api/courses/{course['id']}", headers=headers)
        assert response.status_code == 200
        assert response.json()["deleted_course_id"] == course["id"]

    @pytest.mark.asyncio
    async def test_anonymous_can_browse_but_not_write(self, api):
        """Anonymous callers should read courses but get 401 on writes."""
        client, _ = api

        listing = await client.get("/api/courses")
        create = await client.post("/api/courses", json={"title": "Arrays"})

        assert listing.status_code == 200
        assert create.status_code == 401

    @pytest.mark.asyncio
    async def test_blank_course_title_is_rejected(self, api):
        """A whitespace-only title should fail validation, not the server."""
        client, _ = api
        await sync(client)

        response = await client.post(
            "/api/courses", headers=auth_headers("ext_123"), json={"title": "   "}
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_unsynced_user_gets_404_on_profile(self, api):
        """The profile endpoint should require a prior sync."""
        client, _ = api

        response = await client.get("/api/users/me", headers=auth_headers("ext_new"))

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_cannot_delete_other_users_course(self, api):
        """Should return 403 when deleting someone else's course."""
        client, _ = api
        await sync(client, "ext_owner")
        await sync(client, "ext_intruder")
        response = await client.post(
            "/api/courses", headers=auth_headers("ext_owner"), json={"title": "Mine"}
        )
        course_id = response.json()["id"]

        response = await client.delete(
            f"/api/courses/{course_id}", headers=auth_headers("ext_intruder")
        )

        assert response.status_code == 403


class TestParseQuestion:
    """Tests for POST /api/parse-question."""

    @pytest.mark.asyncio
    async def test_parses_leetcode_url(self, api):
        client, container = api
        parser = await container.get(QuestionParser)
        parser.register(
            "two-sum",
            ParsedQuestion(
                title="Two Sum",
                difficulty=Difficulty.EASY,
                topics=["Array", "hash_map"],
            ),
        )

        response = await client.post(
            "/api/parse-question",
            json={"url": "https://leetcode.com/problems/two-sum/"},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["title"] == "Two Sum"
        assert data["difficulty"] == "EASY"
        assert data["topics"] == ["Array", "Hash Table"]

    @pytest.mark.asyncio
    async def test_missing_url_is_400(self, api):
        client, _ = api

        response = await client.post("/api/parse-question", json={"link": "x"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Valid URL is required"

    @pytest.mark.asyncio
    async def test_unsupported_url_is_400(self, api):
        client, _ = api

        response = await client.post(
            "/api/parse-question", json={"url": "https://example.com/problem"}
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Unable to parse question from this URL"

    @pytest.mark.asyncio
    async def test_unexpected_parser_failure_is_500(self, api):
        client, container = api
        parser = await container.get(QuestionParser)
        parser.fail_with = RuntimeError("parser bug")

        response = await client.post(
            "/api/parse-question",
            json={"url": "https://leetcode.com/problems/two-sum/"},
        )

        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to parse question"
