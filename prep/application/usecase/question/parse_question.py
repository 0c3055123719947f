"""Parse question URL use case."""

from pydantic import BaseModel

from prep.domain.service import QuestionParserService
from prep.domain.value import ParsedQuestion


class ParseQuestionRequest(BaseModel):
    """Parse question request."""

    url: str


class ParseQuestionResponse(BaseModel):
    """Parse question response."""

    data: ParsedQuestion


class ParseQuestionUseCase:
    """Use case for turning a problem URL into question metadata."""

    def __init__(self, question_parser_service: QuestionParserService) -> None:
        """Initialize parse question use case.

        Args:
            question_parser_service: Question parser domain service
        """
        self.question_parser_service = question_parser_service

    async def execute(
        self, request: ParseQuestionRequest
    ) -> ParseQuestionResponse | None:
        """Execute parse question flow.

        Returns:
            Parsed metadata, or None if the URL cannot be parsed

        Raises:
            ProviderError: If the upstream site cannot be queried
        """
        parsed = await self.question_parser_service.parse_url(request.url.strip())
        if parsed is None:
            return None
        return ParseQuestionResponse(data=parsed)
