"""Unit tests for QuestionParserService and topic mapping."""

import pytest

from prep.adapter.error import ProviderError
from prep.adapter.leetcode.parser import MockLeetCodeParser
from prep.domain.service import QuestionParserService, map_topics
from prep.domain.value import Difficulty, ParsedQuestion


class TestMapTopics:
    """Tests for map_topics()."""

    def test_maps_aliases_to_canonical_names(self):
        """Should normalise case, spacing and underscores before lookup."""
        assert map_topics(["hash_map", "Two Pointers", "DP", "bfs"]) == [
            "Hash Table",
            "Two Pointers",
            "Dynamic Programming",
            "Breadth-First Search",
        ]

    def test_unknown_topics_pass_through(self):
        """Should keep unknown topics unchanged."""
        assert map_topics(["Rolling Hash"]) == ["Rolling Hash"]


class TestQuestionParserService:
    """Tests for QuestionParserService.parse_url()."""

    @pytest.mark.asyncio
    async def test_parses_supported_url_and_maps_topics(self):
        """Should return parsed metadata with canonical topics."""
        # Arrange
        parser = MockLeetCodeParser()
        parser.register(
            "two-sum",
            ParsedQuestion(
                title="Two Sum",
                difficulty=Difficulty.EASY,
                topics=["Array", "Hash Table", "hashmap"],
            ),
        )
        service = QuestionParserService(parser)

        # Act
        parsed = await service.parse_url("https://leetcode.com/problems/two-sum/")

        # Assert
        assert parsed is not None
        assert parsed.title == "Two Sum"
        assert parsed.topics == ["Array", "Hash Table", "Hash Table"]

    @pytest.mark.asyncio
    async def test_unsupported_url_returns_none(self):
        """Should return None for URLs no parser understands."""
        service = QuestionParserService(MockLeetCodeParser())

        assert await service.parse_url("https://example.com/problem/1") is None

    @pytest.mark.asyncio
    async def test_unknown_problem_returns_none(self):
        """Should return None when the provider has no such problem."""
        service = QuestionParserService(MockLeetCodeParser())

        assert (
            await service.parse_url("https://leetcode.com/problems/no-such-problem/")
            is None
        )

    @pytest.mark.asyncio
    async def test_provider_failure_propagates(self):
        """Should let provider errors reach the caller."""
        parser = MockLeetCodeParser()
        parser.fail_with = ProviderError("down")
        service = QuestionParserService(parser)

        with pytest.raises(ProviderError):
            await service.parse_url("https://leetcode.com/problems/two-sum/")
