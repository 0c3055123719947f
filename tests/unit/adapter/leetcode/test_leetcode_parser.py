"""Unit tests for the LeetCode question parser."""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from prep.adapter.error import ProviderError
from prep.adapter.leetcode.parser import (
    RealLeetCodeParser,
    extract_slug,
    parse_difficulty,
)
from prep.domain.service import QuestionParserService
from prep.domain.value import Difficulty

GRAPHQL_URL = "https://leetcode.test/graphql"


def make_response(status_code: int, payload: dict | None = None) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload or {}
    return response


class TestHelpers:
    """Tests for slug and difficulty helpers."""

    @pytest.mark.parametrize(
        "url,slug",
        [
            ("https://leetcode.com/problems/two-sum/", "two-sum"),
            ("https://leetcode.com/problems/two-sum/description/", "two-sum"),
            ("https://www.leetcode.com/problems/lru-cache?envType=study", "lru-cache"),
            ("https://example.com/problems/two-sum/", None),
            ("not a url", None),
        ],
    )
    def test_extract_slug(self, url, slug):
        assert extract_slug(url) == slug

    def test_parse_difficulty(self):
        assert parse_difficulty("Easy") == Difficulty.EASY
        assert parse_difficulty("Medium") == Difficulty.MEDIUM
        assert parse_difficulty("Hard") == Difficulty.HARD
        assert parse_difficulty("Extreme") == Difficulty.HARD
        assert parse_difficulty(None) is None


class TestRealLeetCodeParser:
    """Tests for RealLeetCodeParser.parse_url()."""

    @pytest.mark.asyncio
    async def test_parses_question_detail(self):
        """Should map the GraphQL question onto ParsedQuestion."""
        payload = {
            "data": {
                "question": {
                    "title": "Two Sum",
                    "difficulty": "Easy",
                    "content": "<p>Given an array...</p>",
                    "topicTags": [{"name": "Array"}, {"name": "Hash Table"}],
                }
            }
        }
        parser = RealLeetCodeParser(graphql_url=GRAPHQL_URL)

        with patch("httpx.AsyncClient") as mock_client:
            post = AsyncMock(return_value=make_response(200, payload))
            mock_client.return_value.__aenter__.return_value.post = post

            parsed = await parser.parse_url("https://leetcode.com/problems/two-sum/")

        assert parsed is not None
        assert parsed.title == "Two Sum"
        assert parsed.difficulty == Difficulty.EASY
        assert parsed.topics == ["Array", "Hash Table"]
        assert parsed.description == "<p>Given an array...</p>"
        body = post.call_args.kwargs["json"]
        assert body["variables"] == {"titleSlug": "two-sum"}

    @pytest.mark.asyncio
    async def test_missing_question_returns_none(self):
        """Should return None when LeetCode has no such problem."""
        parser = RealLeetCodeParser(graphql_url=GRAPHQL_URL)

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=make_response(200, {"data": {"question": None}})
            )

            parsed = await parser.parse_url("https://leetcode.com/problems/nope/")

        assert parsed is None

    @pytest.mark.asyncio
    async def test_url_without_slug_skips_request(self):
        """Should not call LeetCode for URLs without a problem slug."""
        parser = RealLeetCodeParser(graphql_url=GRAPHQL_URL)

        with patch("httpx.AsyncClient") as mock_client:
            parsed = await parser.parse_url("https://leetcode.com/contest/")

        assert parsed is None
        mock_client.assert_not_called()

    @pytest.mark.asyncio
    async def test_error_status_raises_provider_error(self):
        """Should raise ProviderError on non-200 responses."""
        parser = RealLeetCodeParser(graphql_url=GRAPHQL_URL)

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=make_response(429)
            )

            with pytest.raises(ProviderError):
                await parser.parse_url("https://leetcode.com/problems/two-sum/")

    @pytest.mark.asyncio
    async def test_transport_error_raises_provider_error(self):
        """Should wrap httpx transport errors."""
        parser = RealLeetCodeParser(graphql_url=GRAPHQL_URL)

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                side_effect=httpx.ReadTimeout("timed out")
            )

            with pytest.raises(ProviderError):
                await parser.parse_url("https://leetcode.com/problems/two-sum/")

    @pytest.mark.asyncio
    async def test_non_json_body_returns_none(self):
        """Should fail closed when a 200 response is not JSON."""
        response = make_response(200)
        response.json.side_effect = json.JSONDecodeError("Expecting value", "<html>", 0)
        service = QuestionParserService(RealLeetCodeParser(graphql_url=GRAPHQL_URL))

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=response
            )

            parsed = await service.parse_url("https://leetcode.com/problems/two-sum/")

        assert parsed is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            ["not", "an", "object"],
            {"data": "maintenance"},
            {"data": {"question": {"title": "Two Sum", "topicTags": [{"slug": "array"}]}}},
            {"data": {"question": {"title": "Two Sum", "topicTags": ["Array"]}}},
        ],
    )
    async def test_unexpected_payload_shape_returns_none(self, payload):
        """Should fail closed when the GraphQL payload has an unexpected shape."""
        response = make_response(200)
        response.json.return_value = payload
        parser = RealLeetCodeParser(graphql_url=GRAPHQL_URL)

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=response
            )

            parsed = await parser.parse_url("https://leetcode.com/problems/two-sum/")

        assert parsed is None
