"""Shared bases for domain entities."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class DomainModel(BaseModel):
    """Immutable entity. Changes produce a new instance via model_copy."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class TimestampedModel(DomainModel):
    """Entity that records when it was created and last changed."""

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
