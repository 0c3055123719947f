"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Sequence
from uuid import UUID

from prep.domain.model import Course, Question, SolvedQuestion, User
from prep.domain.value import (
    CourseId,
    Difficulty,
    QuestionId,
    SolvedQuestionId,
    UserId,
)
from prep.domain.value.types import ExternalId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        external_id=ExternalId(row["external_id"]),
        email=row.get("email"),
        name=row.get("name"),
        bookmarked_question_ids=[
            QuestionId(_uuid(qid)) for qid in row.get("bookmarked_question_ids") or []
        ],
        total_courses_created=row.get("total_courses_created", 0),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_course(row: Dict[str, Any]) -> Course:
    """Convert database row to Course domain model.

    Args:
        row: Database row as dict

    Returns:
        Course domain model
    """
    return Course(
        id=CourseId(_uuid(row["id"])),
        title=row["title"],
        user_id=UserId(_uuid(row["user_id"])) if row.get("user_id") else None,
        is_default=row["is_default"],
        question_count=row["question_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def course_to_dict(course: Course) -> Dict[str, Any]:
    """Convert Course domain model to database dict.

    Args:
        course: Course domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return course.model_dump()


def row_to_question(
    row: Dict[str, Any], course_ids: Sequence[UUID] = ()
) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict
        course_ids: Ids of the courses linking the question

    Returns:
        Question domain model
    """
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        topics=list(row.get("topics") or []),
        urls=list(row.get("urls") or []),
        difficulty=Difficulty(row["difficulty"]),
        course_ids=[CourseId(_uuid(cid)) for cid in course_ids],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict.

    Course links live in course_questions and are excluded.

    Args:
        question: Question domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = question.model_dump(exclude={"course_ids"})
    data["difficulty"] = question.difficulty.value
    return data


def row_to_solved_question(row: Dict[str, Any]) -> SolvedQuestion:
    """Convert database row to SolvedQuestion domain model.

    Args:
        row: Database row as dict

    Returns:
        SolvedQuestion domain model
    """
    return SolvedQuestion(
        id=SolvedQuestionId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        solved_at=row["solved_at"],
    )
