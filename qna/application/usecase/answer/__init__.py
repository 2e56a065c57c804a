"""Answer use cases."""

from .add_answer import AddAnswerRequest, AddAnswerUseCase, AnswerResponse
from .vote_answer import (
    VoteAnswerRequest,
    VoteAnswerResponse,
    VoteAnswerUseCase,
    VoteDirection,
)

__all__ = [
    "AddAnswerRequest",
    "AddAnswerUseCase",
    "AnswerResponse",
    "VoteAnswerRequest",
    "VoteAnswerResponse",
    "VoteAnswerUseCase",
    "VoteDirection",
]
