"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status

from prep.adapter.error import AdapterError
from prep.application.usecase.auth import (
    SyncUserRequest,
    SyncUserResponse,
    SyncUserUseCase,
)
from prep.config import AuthSettings
from prep.domain.error import DomainError
from prep.interface.api.session import extract_session_token
from prep.interface.error import http_exception_for

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


@router.post("/sync-user", response_model=SyncUserResponse)
async def sync_user(
    request: Request,
    sync_user_use_case: FromDishka[SyncUserUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> SyncUserResponse:
    """Mirror the signed-in identity into the local user store.

    Idempotent: repeated and concurrent calls converge on one user record.
    The request body is ignored; the caller is identified by the session
    token (Authorization bearer header or session cookie).

    Args:
        request: Incoming request carrying the session token
        sync_user_use_case: Sync user use case from DI
        auth_settings: Authentication settings from DI

    Returns:
        The stored user

    Raises:
        HTTPException: 401 unauthenticated, 404 unknown identity,
            502 provider failure, 500 storage failure

    Example:
        POST /api/auth/sync-user
        Authorization: Bearer <session token>

        Response:
        {
            "message": "User synced successfully",
            "user": {"id": "...", "external_id": "user_2abc", ...}
        }
    """
    token = extract_session_token(request, auth_settings)

    try:
        result = await sync_user_use_case.execute(SyncUserRequest(token=token))
    except (DomainError, AdapterError) as e:
        http_error = http_exception_for(e)
        if http_error is None:
            raise
        logger.warning(f"User sync rejected: {http_error.status_code} {e}")
        raise http_error
    except Exception as e:
        logger.exception(f"Unexpected error syncing user: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to sync user",
        )

    logger.info(f"User synced: {result.user.external_id}")
    return result
