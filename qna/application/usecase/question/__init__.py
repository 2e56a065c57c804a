"""Question use cases."""

from .add_question import (
    AddQuestionRequest,
    AddQuestionUseCase,
    QuestionResponse,
    TagResponse,
)
from .get_question_by_id import (
    GetQuestionByIdRequest,
    GetQuestionByIdUseCase,
    QuestionDetailResponse,
)
from .list_questions import ListQuestionsRequest, ListQuestionsUseCase

__all__ = [
    "AddQuestionRequest",
    "AddQuestionUseCase",
    "QuestionResponse",
    "TagResponse",
    "GetQuestionByIdRequest",
    "GetQuestionByIdUseCase",
    "QuestionDetailResponse",
    "ListQuestionsRequest",
    "ListQuestionsUseCase",
]
