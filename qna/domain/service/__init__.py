"""Domain services."""

from .answer_service import AnswerService
from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .question_service import QuestionService
from .tag_service import TagService
from .user_service import UserService

__all__ = [
    "Service",
    "AnswerService",
    "CommentService",
    "JWTService",
    "QuestionService",
    "TagService",
    "UserService",
]
