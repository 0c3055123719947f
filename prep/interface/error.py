"""Interface layer errors."""

import logfire
from fastapi import HTTPException, status

from prep.adapter.error import IdentityNotFoundError, ProviderError
from prep.domain.error import (
    ConflictError,
    LimitExceededError,
    NotAuthorizedError,
    NotFoundError,
    UnauthenticatedError,
)


class InterfaceError(Exception):
    """Base interface error."""

    pass


class InvalidRequestError(InterfaceError):
    """Request body is missing or malformed."""

    pass


def http_exception_for(error: Exception) -> HTTPException | None:
    """Map a domain or adapter error onto an HTTP error.

    Args:
        error: Error raised by a use case

    Returns:
        Matching HTTPException, or None for errors that should become a 500
    """
    if isinstance(error, UnauthenticatedError):
        return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(error))
    if isinstance(error, (NotFoundError, IdentityNotFoundError)):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, (NotAuthorizedError, LimitExceededError)):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(error))
    if isinstance(error, ProviderError):
        return HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Identity provider unavailable",
        )
    if isinstance(error, ConflictError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    if isinstance(error, InvalidRequestError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    return None


def error_response(error: Exception, fallback_detail: str) -> HTTPException:
    """HTTP error for a failed use case, logging it on the way.

    Args:
        error: Error raised by a use case
        fallback_detail: Detail for unexpected errors (500)

    Returns:
        HTTPException to raise
    """
    http_error = http_exception_for(error)
    if http_error is not None:
        logfire.warn(
            "Request rejected",
            status_code=http_error.status_code,
            error=str(error),
        )
        return http_error

    logfire.error(fallback_detail, error=str(error), error_type=type(error).__name__)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=fallback_detail,
    )
