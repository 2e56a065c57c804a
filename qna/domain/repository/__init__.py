"""Repository interfaces for the Q&A domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from qna.domain.repository.answer import AnswerRepository
from qna.domain.repository.comment import CommentRepository
from qna.domain.repository.question import QuestionRepository
from qna.domain.repository.tag import TagRepository
from qna.domain.repository.user import UserRepository

__all__ = [
    "AnswerRepository",
    "CommentRepository",
    "QuestionRepository",
    "TagRepository",
    "UserRepository",
]
