"""Entity identifiers.

Local ids are UUIDs assigned by this service. The identity provider's id
for a person is ExternalId in types.py.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
CourseId = NewType("CourseId", UUID)
QuestionId = NewType("QuestionId", UUID)
SolvedQuestionId = NewType("SolvedQuestionId", UUID)
