"""Add comment use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from qna.domain.error import NotFoundError
from qna.domain.model import Comment
from qna.domain.service import AnswerService, CommentService, UserService
from qna.domain.value import AnswerId, UserId, utc_now


class CommentResponse(BaseModel):
    """Comment body."""

    id: str
    text: str
    commented_by: str
    comment_date_time: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentResponse":
        return cls(
            id=str(comment.id),
            text=comment.text,
            commented_by=comment.commented_by,
            comment_date_time=comment.comment_date_time,
        )


class AddCommentRequest(BaseModel):
    """Add comment request."""

    answer_id: str
    text: str
    comment_date_time: datetime | None = None
    user_id: str  # From the session token
    username: str  # From the session token


class AddCommentUseCase:
    """Use case for commenting on an answer."""

    def __init__(
        self,
        comment_service: CommentService,
        answer_service: AnswerService,
        user_service: UserService,
    ) -> None:
        """Initialize add comment use case.

        Args:
            comment_service: Comment domain service
            answer_service: Answer domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.answer_service = answer_service
        self.user_service = user_service

    async def execute(self, request: AddCommentRequest) -> CommentResponse:
        """Execute add comment flow.

        Args:
            request: Add comment request

        Returns:
            Created comment

        Raises:
            NotFoundError: If the answer or the commenting user does not exist
            ValidationError: If the comment is invalid
        """
        answer_id = AnswerId(UUID(request.answer_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span("add_comment.execute", answer_id=request.answer_id):
            answer = await self.answer_service.get_answer_by_id(answer_id)
            if answer is None:
                raise NotFoundError("Answer", request.answer_id)

            user = await self.user_service.get_user_by_id(user_id)
            if user is None:
                raise NotFoundError("User", request.user_id)

            comment = await self.comment_service.create_comment(
                text=request.text,
                commented_by=request.username,
                comment_date_time=request.comment_date_time or utc_now(),
            )
            updated = await self.answer_service.find_by_id_and_add_comment(
                answer.id, comment.id
            )
            if updated is None:
                raise NotFoundError("Answer", request.answer_id)
            await self.user_service.add_comment(user, comment.id)

            return CommentResponse.from_comment(comment)
