"""Unit tests for mapping use case errors onto HTTP errors."""

import pytest
from pydantic import BaseModel, ValidationError

from prep.adapter.error import IdentityNotFoundError, ProviderError
from prep.domain.error import (
    ConflictError,
    LimitExceededError,
    NotAuthorizedError,
    NotFoundError,
    UnauthenticatedError,
)
from prep.interface.error import InvalidRequestError, error_response, http_exception_for


class TestHttpExceptionFor:
    """Tests for http_exception_for()."""

    @pytest.mark.parametrize(
        "error,status_code",
        [
            (UnauthenticatedError("Authentication required"), 401),
            (NotFoundError("User", "ext_1"), 404),
            (IdentityNotFoundError("ext_1"), 404),
            (NotAuthorizedError("nope"), 403),
            (LimitExceededError("full"), 403),
            (ProviderError("down"), 502),
            (ConflictError("duplicate title"), 409),
            (InvalidRequestError("Valid URL is required"), 400),
        ],
    )
    def test_known_errors(self, error, status_code):
        http_error = http_exception_for(error)

        assert http_error is not None
        assert http_error.status_code == status_code

    def test_unexpected_error_is_unmapped(self):
        assert http_exception_for(RuntimeError("boom")) is None

    def test_internal_validation_error_is_unmapped(self):
        """A model built from bad internal data is a server error, not a 400."""

        class Snapshot(BaseModel):
            count: int

        with pytest.raises(ValidationError) as exc_info:
            Snapshot(count="many")

        assert http_exception_for(exc_info.value) is None
        assert http_exception_for(ValueError("bad state")) is None


class TestErrorResponse:
    """Tests for error_response()."""

    def test_unexpected_error_becomes_500_with_fallback_detail(self):
        """Should hide internal error text behind the fallback detail."""
        http_error = error_response(RuntimeError("db password wrong"), "Failed to sync user")

        assert http_error.status_code == 500
        assert http_error.detail == "Failed to sync user"
