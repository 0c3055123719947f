"""Course entity.

A course is a named list of questions. Default courses are shared by
everyone and have no owner; user courses belong to one user.
"""

from typing import Optional

from pydantic import Field

from prep.domain.model.common import TimestampedModel
from prep.domain.value import CourseId, UserId


class Course(TimestampedModel):
    """Course entity."""

    id: CourseId
    title: str = Field(min_length=1, max_length=200)
    user_id: Optional[UserId] = None  # None for default courses
    is_default: bool = False
    question_count: int = Field(default=0, ge=0)

    def is_owned_by(self, user_id: UserId) -> bool:
        """Whether the course is a user course owned by user_id."""
        return not self.is_default and self.user_id == user_id
