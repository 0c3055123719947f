"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from prep.domain.value.common import RootValueObject, ValueObject


class Difficulty(str, Enum):
    """Question difficulty."""

    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"


class ExternalId(RootValueObject[str]):
    """Identifier of a person at the identity provider (Clerk user id).

    Opaque and stable per person, e.g. "user_2abcXYZ".
    """

    @field_validator("root")
    @classmethod
    def validate_external_id(cls, v: str) -> str:
        """Validate external id is not blank and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 255:
            raise ValueError("External id must be 1-255 characters")
        return v


class ExternalIdentity(ValueObject):
    """Profile snapshot of a signed-in identity, as reported by the provider."""

    external_id: ExternalId
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None

    @property
    def display_name(self) -> str | None:
        """First and last name joined, or None when both are empty."""
        name = f"{self.first_name or ''} {self.last_name or ''}".strip()
        return name or None


class ParsedQuestion(ValueObject):
    """Question metadata extracted from a problem URL."""

    title: str | None = None
    difficulty: Difficulty | None = None
    topics: list[str] = []
    description: str | None = None
