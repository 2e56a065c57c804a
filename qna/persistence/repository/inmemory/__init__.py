"""In-memory repository implementations for testing."""

from .answer import InMemoryAnswerRepository
from .comment import InMemoryCommentRepository
from .question import InMemoryQuestionRepository
from .tag import InMemoryTagRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryAnswerRepository",
    "InMemoryCommentRepository",
    "InMemoryQuestionRepository",
    "InMemoryTagRepository",
    "InMemoryUserRepository",
]
