"""PostgreSQL implementation of Comment repository."""

from typing import Optional, Sequence

import logfire
from sqlalchemy import desc, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model.comment import Comment
from qna.domain.repository.comment import CommentRepository
from qna.domain.value import CommentId
from qna.persistence.mappers import comment_to_dict, row_to_comment
from qna.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> list[Comment]:
        """Find comments by ID, most recent first."""
        if not comment_ids:
            return []

        stmt = (
            select(comments_table)
            .where(comments_table.c.id.in_(list(comment_ids)))
            .order_by(desc(comments_table.c.comment_date_time))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        with logfire.span("comment_repository.save", comment_id=str(comment.id)):
            stmt = insert(comments_table).values(**comment_to_dict(comment))
            await self.session.execute(stmt)
            await self.session.flush()
            return comment
