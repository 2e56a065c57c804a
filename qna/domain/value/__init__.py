"""Domain value objects for the Q&A backend."""

from qna.domain.value.identifiers import (
    AnswerId,
    CommentId,
    QuestionId,
    TagId,
    UserId,
    VoterId,
)
from qna.domain.value.types import (
    QuestionOrder,
    SearchQuery,
    TagCount,
    TagName,
    Timestamp,
    utc_now,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "CommentId",
    "TagId",
    "VoterId",
    # Types
    "QuestionOrder",
    "SearchQuery",
    "TagCount",
    "TagName",
    "Timestamp",
    "utc_now",
]
