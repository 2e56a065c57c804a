"""Domain model entities for the Q&A backend."""

from qna.domain.model.answer import Answer
from qna.domain.model.comment import Comment
from qna.domain.model.question import Question
from qna.domain.model.tag import Tag
from qna.domain.model.user import User, UserProfile

__all__ = [
    "Answer",
    "Comment",
    "Question",
    "Tag",
    "User",
    "UserProfile",
]
