"""SQLAlchemy table definitions for prep.

The schema is created with metadata.create_all (see scripts/init_db.py).
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (mirror of identity provider users)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("external_id", String(255), nullable=False),  # Clerk user id
    Column("email", String(255), nullable=True),
    Column("name", String(255), nullable=True),
    Column(
        "bookmarked_question_ids",
        ARRAY(UUID),
        nullable=False,
        server_default="{}",
    ),
    Column("total_courses_created", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("external_id", name="uq_users_external_id"),
    CheckConstraint(
        "total_courses_created >= 0", name="total_courses_created_non_negative"
    ),
)

Index("idx_users_email", users_table.c.email)

# ============================================================================
# COURSES TABLE
# ============================================================================
courses_table = Table(
    "courses",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("title", String(200), nullable=False),
    Column(
        "user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=True
    ),  # NULL for default courses
    Column("is_default", Boolean, nullable=False, server_default="false"),
    Column("question_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("question_count >= 0", name="question_count_non_negative"),
)

Index("idx_courses_user_id", courses_table.c.user_id)
Index("idx_courses_is_default", courses_table.c.is_default)

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("title", String(300), nullable=False),
    Column("topics", ARRAY(Text), nullable=False, server_default="{}"),
    Column("urls", ARRAY(Text), nullable=False, server_default="{}"),
    Column(
        "difficulty",
        Enum("EASY", "MEDIUM", "HARD", name="difficulty"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# COURSE_QUESTIONS TABLE (many-to-many)
# ============================================================================
course_questions_table = Table(
    "course_questions",
    metadata,
    Column(
        "course_id",
        UUID,
        ForeignKey("courses.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_course_questions_question_id", course_questions_table.c.question_id)

# ============================================================================
# SOLVED_QUESTIONS TABLE
# ============================================================================
solved_questions_table = Table(
    "solved_questions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "solved_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "question_id", name="uq_solved_user_question"),
)

Index(
    "idx_solved_questions_user_solved_at",
    solved_questions_table.c.user_id,
    solved_questions_table.c.solved_at,
)
