"""PostgreSQL repository implementations."""

from qna.persistence.repository.answer import PostgresAnswerRepository
from qna.persistence.repository.comment import PostgresCommentRepository
from qna.persistence.repository.question import PostgresQuestionRepository
from qna.persistence.repository.tag import PostgresTagRepository
from qna.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresQuestionRepository",
    "PostgresAnswerRepository",
    "PostgresCommentRepository",
    "PostgresTagRepository",
]
