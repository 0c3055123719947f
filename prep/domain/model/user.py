"""User aggregate root.

A local mirror of a person signed in with the identity provider.
"""

from typing import Optional

from pydantic import Field

from prep.domain.model.common import TimestampedModel
from prep.domain.value import ExternalIdentity, QuestionId, UserId
from prep.domain.value.types import ExternalId


class User(TimestampedModel):
    """Local user record keyed by the provider's external id.

    At most one record exists per external id. Records are created on the
    first sync and updated in place afterwards.
    """

    id: UserId
    external_id: ExternalId
    email: Optional[str] = None
    name: Optional[str] = None
    bookmarked_question_ids: list[QuestionId] = Field(default_factory=list)
    total_courses_created: int = Field(default=0, ge=0)

    def differs_from(self, identity: ExternalIdentity) -> bool:
        """Whether the mirrored profile fields are stale for this snapshot."""
        return self.email != identity.email or self.name != identity.display_name

    def has_bookmarked(self, question_id: QuestionId) -> bool:
        """Whether the question is in the user's bookmarks."""
        return question_id in self.bookmarked_question_ids
