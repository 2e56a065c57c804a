"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from qna.domain.model.tag import Tag
from qna.domain.value import TagId, TagName


class TagRepository(ABC):
    """Repository for Tag entity."""

    @abstractmethod
    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find a tag by ID."""
        pass

    @abstractmethod
    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find a tag by its exact name.

        Args:
            name: Tag name

        Returns:
            The tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, tag_ids: Sequence[TagId]) -> list[Tag]:
        """Find the tags with the given IDs (unknown IDs are skipped)."""
        pass

    @abstractmethod
    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all stored tags."""
        pass

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Insert a new tag.

        Args:
            tag: Tag to insert

        Returns:
            The saved tag
        """
        pass
