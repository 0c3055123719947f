#!/usr/bin/env python3
"""Create the database schema and seed the default course, with Logfire error tracking."""

import asyncio
import sys
from datetime import datetime, timezone
from uuid import uuid4

import logfire
from sqlalchemy import select

from prep.config import Settings
from prep.domain.value import Difficulty
from prep.persistence.database import create_engine, create_schema
from prep.persistence.tables import (
    course_questions_table,
    courses_table,
    questions_table,
)
from prep.util.observability import configure_logfire

DEFAULT_COURSE_TITLE = "Blind 75 Essentials"

DEFAULT_QUESTIONS = [
    {
        "title": "Two Sum",
        "topics": ["Array", "Hash Table"],
        "urls": [
            "https://leetcode.com/problems/two-sum/",
            "https://www.geeksforgeeks.org/given-an-array-a-and-a-number-x-check-for-pair-in-a-with-sum-as-x/",
        ],
        "difficulty": Difficulty.EASY,
    },
    {
        "title": "Add Two Numbers",
        "topics": ["Linked List", "Math", "Recursion"],
        "urls": [
            "https://leetcode.com/problems/add-two-numbers/",
            "https://www.geeksforgeeks.org/add-two-numbers-represented-by-linked-lists/",
        ],
        "difficulty": Difficulty.MEDIUM,
    },
    {
        "title": "Longest Substring Without Repeating Characters",
        "topics": ["Hash Table", "String", "Sliding Window"],
        "urls": [
            "https://leetcode.com/problems/longest-substring-without-repeating-characters/",
            "https://www.geeksforgeeks.org/length-of-the-longest-substring-without-repeating-characters/",
        ],
        "difficulty": Difficulty.MEDIUM,
    },
    {
        "title": "Median of Two Sorted Arrays",
        "topics": ["Array", "Binary Search", "Divide and Conquer"],
        "urls": [
            "https://leetcode.com/problems/median-of-two-sorted-arrays/",
            "https://www.geeksforgeeks.org/median-of-two-sorted-arrays-of-different-sizes/",
        ],
        "difficulty": Difficulty.HARD,
    },
    {
        "title": "Valid Parentheses",
        "topics": ["String", "Stack"],
        "urls": [
            "https://leetcode.com/problems/valid-parentheses/",
            "https://www.geeksforgeeks.org/check-for-balanced-parentheses-in-an-expression/",
        ],
        "difficulty": Difficulty.EASY,
    },
]


async def init_db(settings: Settings) -> None:
    """Create missing tables and seed the default course once."""
    engine = create_engine(settings)
    try:
        await create_schema(engine)

        async with engine.begin() as conn:
            existing = await conn.execute(
                select(courses_table.c.id).where(courses_table.c.is_default.is_(True))
            )
            if existing.first():
                logfire.info("Default course already present, skipping seed")
                return

            now = datetime.now(timezone.utc)
            course_id = uuid4()
            await conn.execute(
                courses_table.insert().values(
                    id=course_id,
                    title=DEFAULT_COURSE_TITLE,
                    user_id=None,
                    is_default=True,
                    question_count=len(DEFAULT_QUESTIONS),
                    created_at=now,
                    updated_at=now,
                )
            )
            for question in DEFAULT_QUESTIONS:
                question_id = uuid4()
                await conn.execute(
                    questions_table.insert().values(
                        id=question_id,
                        title=question["title"],
                        topics=question["topics"],
                        urls=question["urls"],
                        difficulty=question["difficulty"].value,
                        created_at=now,
                        updated_at=now,
                    )
                )
                await conn.execute(
                    course_questions_table.insert().values(
                        course_id=course_id, question_id=question_id
                    )
                )
            logfire.info(
                "Default course seeded",
                course_id=str(course_id),
                question_count=len(DEFAULT_QUESTIONS),
            )
    finally:
        await engine.dispose()


def main() -> int:
    """Initialise the database and log any errors to Logfire."""
    settings = Settings()

    # Configure Logfire
    configure_logfire(settings)

    try:
        logfire.info("Starting database initialisation")
        asyncio.run(init_db(settings))
        logfire.info("Database initialisation completed successfully")
        return 0

    except Exception as e:
        logfire.error(
            "Database initialisation failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails and doesn't start with broken schema
        raise


if __name__ == "__main__":
    sys.exit(main())
