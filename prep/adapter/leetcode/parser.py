"""LeetCode question parser.

Resolves leetcode.com/problems/<slug> URLs through LeetCode's public
GraphQL endpoint.
"""

import re

import httpx
import logfire

from prep.adapter.error import ProviderError
from prep.domain.service.question_parser import QuestionParser
from prep.domain.value import Difficulty, ParsedQuestion

PROBLEM_URL_PATTERN = re.compile(r"leetcode\.com/problems/([^/?#]+)")

QUESTION_DETAIL_QUERY = """
query getQuestionDetail($titleSlug: String!) {
  question(titleSlug: $titleSlug) {
    title
    difficulty
    content
    topicTags {
      name
    }
  }
}
"""


def extract_slug(url: str) -> str | None:
    """Extract the problem slug from a LeetCode URL."""
    match = PROBLEM_URL_PATTERN.search(url)
    return match.group(1) if match else None


def parse_difficulty(value: str | None) -> Difficulty | None:
    """Map LeetCode's "Easy"/"Medium"/"Hard" onto Difficulty."""
    if not value:
        return None
    try:
        return Difficulty(value.upper())
    except ValueError:
        return Difficulty.HARD


class LeetCodeParser(QuestionParser):
    """Base class for LeetCode parsers.

    Provides type distinction for dependency injection.
    """

    def supports(self, url: str) -> bool:
        """Only leetcode.com problem URLs are supported."""
        return extract_slug(url) is not None


class RealLeetCodeParser(LeetCodeParser):
    """LeetCode parser backed by the GraphQL API."""

    def __init__(self, graphql_url: str, timeout: float = 10.0) -> None:
        """Initialize LeetCode parser.

        Args:
            graphql_url: LeetCode GraphQL endpoint
            timeout: Request timeout in seconds
        """
        self.graphql_url = graphql_url
        self.timeout = timeout

    async def parse_url(self, url: str) -> ParsedQuestion | None:
        """Fetch question details for a LeetCode problem URL.

        Args:
            url: Problem URL

        Returns:
            Parsed question, or None if the URL has no slug, the problem
            does not exist or the response cannot be read

        Raises:
            ProviderError: If the GraphQL request fails
        """
        slug = extract_slug(url)
        if slug is None:
            return None

        payload = {
            "query": QUESTION_DETAIL_QUERY,
            "variables": {"titleSlug": slug},
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.graphql_url,
                    json=payload,
                    headers={"Content-Type": "application/json"},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("LeetCode GraphQL HTTP error", slug=slug, error=str(e))
            raise ProviderError(f"HTTP error querying LeetCode: {e}") from e

        if response.status_code != 200:
            logfire.error(
                "LeetCode GraphQL request failed",
                slug=slug,
                status_code=response.status_code,
            )
            raise ProviderError(
                f"LeetCode GraphQL request failed: {response.status_code}"
            )

        try:
            question = (response.json().get("data") or {}).get("question")
            if not question:
                return None
            return ParsedQuestion(
                title=question.get("title"),
                difficulty=parse_difficulty(question.get("difficulty")),
                topics=[tag["name"] for tag in question.get("topicTags") or []],
                description=question.get("content"),
            )
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logfire.warn(
                "Unreadable LeetCode GraphQL payload",
                slug=slug,
                error_type=type(e).__name__,
            )
            return None


class MockLeetCodeParser(LeetCodeParser):
    """LeetCode parser returning canned questions for testing."""

    def __init__(self) -> None:
        """Initialize mock parser with no canned questions."""
        self._questions: dict[str, ParsedQuestion] = {}
        self.fail_with: Exception | None = None

    def register(self, slug: str, question: ParsedQuestion) -> None:
        """Register the question returned for a slug."""
        self._questions[slug] = question

    async def parse_url(self, url: str) -> ParsedQuestion | None:
        """Return the canned question for the URL's slug."""
        if self.fail_with is not None:
            raise self.fail_with

        slug = extract_slug(url)
        if slug is None:
            return None
        return self._questions.get(slug)
