"""Comment use cases."""

from .add_comment import AddCommentRequest, AddCommentUseCase, CommentResponse

__all__ = [
    "AddCommentRequest",
    "AddCommentUseCase",
    "CommentResponse",
]
