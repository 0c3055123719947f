"""Question entity."""

from pydantic import Field

from prep.domain.model.common import TimestampedModel
from prep.domain.value import CourseId, Difficulty, QuestionId


class Question(TimestampedModel):
    """Practice problem that can appear in several courses."""

    id: QuestionId
    title: str = Field(min_length=1, max_length=300)
    topics: list[str] = Field(default_factory=list)
    urls: list[str] = Field(default_factory=list)
    difficulty: Difficulty
    course_ids: list[CourseId] = Field(default_factory=list)
