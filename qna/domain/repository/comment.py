"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from qna.domain.model.comment import Comment
from qna.domain.value import CommentId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Comments are append-only: there is no update or delete.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> list[Comment]:
        """Find comments by ID, most recent first."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        pass
