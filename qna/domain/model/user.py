"""User aggregate root.

Users sign up with a username, email and password, and keep id-only
back-references to the content they authored.
"""

from pydantic import Field

from qna.domain.model.answer import Answer
from qna.domain.model.comment import Comment
from qna.domain.model.common import DomainModel
from qna.domain.model.question import Question
from qna.domain.value import AnswerId, CommentId, QuestionId, UserId


class User(DomainModel):
    """User aggregate root.

    The password is only ever held as a bcrypt hash.
    """

    id: UserId
    username: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password_hash: str = Field(min_length=1)
    questions: list[QuestionId] = Field(default_factory=list)
    answers: list[AnswerId] = Field(default_factory=list)
    comments: list[CommentId] = Field(default_factory=list)


class UserProfile(DomainModel):
    """Denormalized view of a user with their content resolved."""

    id: UserId
    username: str
    email: str
    questions: list[Question]
    answers: list[Answer]
    comments: list[Comment]
