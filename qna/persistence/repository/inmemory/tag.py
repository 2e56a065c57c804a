"""In-memory tag repository for testing."""

from typing import Optional, Sequence

from qna.domain.model.tag import Tag
from qna.domain.repository.tag import TagRepository
from qna.domain.value import TagId, TagName


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self) -> None:
        self._tags: dict[TagId, Tag] = {}

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        return self._tags.get(tag_id)

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name."""
        for tag in self._tags.values():
            if tag.name == name:
                return tag
        return None

    async def find_by_ids(self, tag_ids: Sequence[TagId]) -> list[Tag]:
        """Find multiple tags by ID."""
        return [self._tags[tag_id] for tag_id in tag_ids if tag_id in self._tags]

    async def find_all(self) -> list[Tag]:
        """Find all tags, ordered by name."""
        return sorted(self._tags.values(), key=lambda t: t.name.root)

    async def count(self) -> int:
        """Count stored tags."""
        return len(self._tags)

    async def save(self, tag: Tag) -> Tag:
        """Insert a new tag."""
        self._tags[tag.id] = tag
        return tag
