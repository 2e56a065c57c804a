"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from qna.domain.model.comment import Comment
from qna.domain.repository import CommentRepository
from qna.domain.value import CommentId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        text: str | None,
        commented_by: str | None,
        comment_date_time: datetime | None,
    ) -> Comment:
        """Create a comment.

        Args:
            text: Comment text
            commented_by: Author username
            comment_date_time: When the comment was made

        Returns:
            Created comment

        Raises:
            ValidationError: If any field is missing or empty
        """
        with logfire.span("comment_service.create_comment", commented_by=commented_by):
            comment = Comment.build(
                id=CommentId(uuid4()),
                text=text,
                commented_by=commented_by,
                comment_date_time=comment_date_time,
            )
            saved = await self.comment_repository.save(comment)
            logfire.info("Comment created", comment_id=str(saved.id))
            return saved
