"""Question URL parsing routes."""

from json import JSONDecodeError

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status

from prep.adapter.error import ProviderError
from prep.application.usecase.question import (
    ParseQuestionRequest,
    ParseQuestionResponse,
    ParseQuestionUseCase,
)
from prep.interface.error import InvalidRequestError

router = APIRouter(tags=["questions"], route_class=DishkaRoute)


async def _read_url(request: Request) -> str:
    """Read the url field from a JSON body.

    Raises:
        InvalidRequestError: If the body is not JSON or url is missing or not a string
    """
    try:
        body = await request.json()
    except (JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidRequestError("Valid URL is required") from e

    url = body.get("url") if isinstance(body, dict) else None
    if not url or not isinstance(url, str):
        raise InvalidRequestError("Valid URL is required")
    return url


@router.post("/parse-question", response_model=ParseQuestionResponse)
async def parse_question(
    request: Request,
    parse_question_use_case: FromDishka[ParseQuestionUseCase],
) -> ParseQuestionResponse:
    """Extract question metadata from a problem URL.

    The body is read by hand so that a missing or non-string url is a 400
    rather than a 422.

    Raises:
        HTTPException: 400 invalid url or unparseable question,
            500 unexpected failure

    Example:
        POST /api/parse-question
        {"url": "https://leetcode.com/problems/two-sum/"}

        Response:
        {"data": {"title": "Two Sum", "difficulty": "EASY", "topics": [...]}}
    """
    try:
        url = await _read_url(request)
    except InvalidRequestError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    try:
        result = await parse_question_use_case.execute(ParseQuestionRequest(url=url))
    except ProviderError as e:
        logfire.warn("Question provider failed", url=url, error=str(e))
        result = None
    except Exception as e:
        logfire.error("Unexpected error parsing question", url=url, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to parse question",
        )

    if result is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Unable to parse question from this URL",
        )

    return result
