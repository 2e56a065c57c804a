"""Tag domain service."""

from typing import Sequence
from uuid import uuid4

import logfire

from qna.domain.model.tag import Tag
from qna.domain.repository import QuestionRepository, TagRepository
from qna.domain.value import TagCount, TagId

from .base import Service


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(
        self, tag_repository: TagRepository, question_repository: QuestionRepository
    ) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
            question_repository: Question repository
        """
        self.tag_repository = tag_repository
        self.question_repository = question_repository

    async def find_or_create_many(self, names: Sequence[str]) -> list[Tag]:
        """Resolve tag names to tags, creating the missing ones.

        Names are processed one at a time in input order, so the result
        order matches the input. A failure part-way leaves the tags created
        so far in place.

        Args:
            names: Tag names

        Returns:
            One tag per input name

        Raises:
            ValidationError: If a name is blank
        """
        with logfire.span("tag_service.find_or_create_many", tags=list(names)):
            tags = []
            for name in names:
                candidate = Tag.build(id=TagId(uuid4()), name=name)
                tag = await self.tag_repository.find_by_name(candidate.name)
                if tag is None:
                    tag = await self.tag_repository.save(candidate)
                    logfire.info("Tag created", tag_name=name, tag_id=str(tag.id))
                tags.append(tag)
            return tags

    async def validate_tags(self, tag_ids: Sequence[TagId]) -> bool:
        """Check the given tag IDs against the tag store.

        Only compares the number of stored tags with the number of IDs;
        it does not check membership.

        Args:
            tag_ids: Tag IDs

        Returns:
            Whether the counts agree
        """
        total = await self.tag_repository.count()
        valid = total == len(tag_ids)
        if not valid:
            logfire.warn("Tag validation failed", stored=total, given=len(tag_ids))
        return valid

    async def get_tags_by_ids(self, tag_ids: Sequence[TagId]) -> list[Tag]:
        """Get tags by ID, keeping the order of ``tag_ids``."""
        tags = await self.tag_repository.find_by_ids(tag_ids)
        by_id = {tag.id: tag for tag in tags}
        return [by_id[tag_id] for tag_id in tag_ids if tag_id in by_id]

    async def get_tags_with_question_count(self) -> list[TagCount]:
        """Count the questions carrying each tag.

        Tags no question refers to are left out.

        Returns:
            One TagCount per referenced tag, ordered by tag name
        """
        with logfire.span("tag_service.get_tags_with_question_count"):
            counts = await self.question_repository.count_by_tag()
            tags = await self.tag_repository.find_by_ids(list(counts))
            result = [
                TagCount(name=tag.name.root, qcnt=counts[tag.id])
                for tag in sorted(tags, key=lambda t: t.name.root)
            ]
            logfire.info("Tag question counts computed", count=len(result))
            return result
