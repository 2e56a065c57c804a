"""Strongly typed identifiers for Q&A domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
QuestionId = NewType("QuestionId", UUID)
AnswerId = NewType("AnswerId", UUID)
CommentId = NewType("CommentId", UUID)
TagId = NewType("TagId", UUID)

# Voters are recorded by their string id (the user id as found in the session token)
VoterId = NewType("VoterId", str)
