"""PostgreSQL implementation of Tag repository."""

from typing import Optional, Sequence

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model.tag import Tag
from qna.domain.repository.tag import TagRepository
from qna.domain.value import TagId, TagName
from qna.persistence.mappers import row_to_tag, tag_to_dict
from qna.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def save(self, tag: Tag) -> Tag:
        """Insert a new tag."""
        stmt = insert(tags_table).values(**tag_to_dict(tag))
        await self.session.execute(stmt)
        await self.session.flush()
        return tag

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        stmt = select(tags_table).where(tags_table.c.id == tag_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name."""
        stmt = select(tags_table).where(tags_table.c.name == name.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_ids(self, tag_ids: Sequence[TagId]) -> list[Tag]:
        """Find multiple tags by ID in a single query."""
        if not tag_ids:
            return []

        stmt = select(tags_table).where(tags_table.c.id.in_(list(tag_ids)))
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def find_all(self) -> list[Tag]:
        """Find all tags, ordered by name."""
        stmt = select(tags_table).order_by(tags_table.c.name)
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def count(self) -> int:
        """Count stored tags."""
        stmt = select(func.count()).select_from(tags_table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0
