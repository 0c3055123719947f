"""Response models shared by several use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from prep.domain.model import Course, Question, SolvedQuestion, User
from prep.domain.value import Difficulty


class UserInfo(BaseModel):
    """Local user record."""

    id: UUID
    external_id: str
    email: str | None
    name: str | None
    bookmarked_question_ids: list[UUID]
    total_courses_created: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            id=user.id,
            external_id=user.external_id.root,
            email=user.email,
            name=user.name,
            bookmarked_question_ids=list(user.bookmarked_question_ids),
            total_courses_created=user.total_courses_created,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class CourseInfo(BaseModel):
    """Course without its questions."""

    id: UUID
    title: str
    user_id: UUID | None
    is_default: bool
    question_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_course(cls, course: Course) -> "CourseInfo":
        return cls(
            id=course.id,
            title=course.title,
            user_id=course.user_id,
            is_default=course.is_default,
            question_count=course.question_count,
            created_at=course.created_at,
            updated_at=course.updated_at,
        )


class QuestionInfo(BaseModel):
    """Question with the ids of the courses containing it."""

    id: UUID
    title: str
    topics: list[str]
    urls: list[str]
    difficulty: Difficulty
    course_ids: list[UUID]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_question(cls, question: Question) -> "QuestionInfo":
        return cls(
            id=question.id,
            title=question.title,
            topics=list(question.topics),
            urls=list(question.urls),
            difficulty=question.difficulty,
            course_ids=list(question.course_ids),
            created_at=question.created_at,
            updated_at=question.updated_at,
        )


class SolvedQuestionInfo(BaseModel):
    """Solved mark."""

    id: UUID
    question_id: UUID
    solved_at: datetime

    @classmethod
    def from_solved(cls, solved: SolvedQuestion) -> "SolvedQuestionInfo":
        return cls(id=solved.id, question_id=solved.question_id, solved_at=solved.solved_at)
