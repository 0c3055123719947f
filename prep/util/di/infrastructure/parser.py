"""Question parser infrastructure providers."""

from dishka import Scope, provide

from prep.adapter.leetcode.parser import RealLeetCodeParser
from prep.config import ParserSettings
from prep.domain.service import QuestionParser
from prep.util.di.base import ProviderBase


class ParserProvider(ProviderBase):
    """Question parser component base."""

    __mock_component__ = "parser"


class ProdParserProvider(ParserProvider):
    """Production parser provider querying LeetCode."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_question_parser(self, parser_settings: ParserSettings) -> QuestionParser:
        """Provide LeetCode question parser."""
        return RealLeetCodeParser(
            graphql_url=parser_settings.leetcode_graphql_url,
            timeout=parser_settings.timeout_seconds,
        )
