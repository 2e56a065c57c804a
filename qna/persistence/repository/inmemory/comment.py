"""In-memory comment repository for testing."""

from typing import Optional, Sequence

from qna.domain.model.comment import Comment
from qna.domain.repository.comment import CommentRepository
from qna.domain.value import CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> list[Comment]:
        """Find comments by ID, most recent first."""
        wanted = set(comment_ids)
        comments = [c for c in self._comments.values() if c.id in wanted]
        comments.sort(key=lambda c: c.comment_date_time, reverse=True)
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        self._comments[comment.id] = comment
        return comment
