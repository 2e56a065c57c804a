"""Domain value objects for the Q&A backend.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from datetime import datetime, timezone
from enum import Enum
from typing import Annotated

from pydantic import AfterValidator, field_validator

from qna.domain.value.common import RootValueObject, ValueObject


def ensure_utc(value: datetime) -> datetime:
    """Treat naive timestamps as UTC so that all timestamps compare."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


Timestamp = Annotated[datetime, AfterValidator(ensure_utc)]


def utc_now() -> datetime:
    """Current time as an aware UTC timestamp."""
    return datetime.now(timezone.utc)


class QuestionOrder(str, Enum):
    """Ordering of question listings."""

    NEWEST = "newest"
    ACTIVE = "active"
    UNANSWERED = "unanswered"


class TagName(RootValueObject[str]):
    """Tag name, any non-blank text (e.g. 'javascript', 'react', 'c++')."""

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name is not blank."""
        if not v or not v.strip():
            raise ValueError("Tag name must not be empty")
        return v


class TagCount(ValueObject):
    """Number of questions carrying a tag."""

    name: str
    qcnt: int


_TAG_TOKEN = re.compile(r"\[([^\[\]]+)\]")


class SearchQuery(ValueObject):
    """Parsed question search string.

    ``[name]`` tokens select questions carrying tag ``name``; the remaining
    words are matched case-insensitively against question titles. A question
    matches when any token matches.
    """

    tags: tuple[str, ...] = ()
    keywords: tuple[str, ...] = ()

    @classmethod
    def parse(cls, search: str | None) -> "SearchQuery":
        """Split a raw search string into tag tokens and keywords."""
        if not search:
            return cls()
        tags = tuple(t.strip().lower() for t in _TAG_TOKEN.findall(search) if t.strip())
        remainder = _TAG_TOKEN.sub(" ", search)
        keywords = tuple(w.lower() for w in remainder.split())
        return cls(tags=tags, keywords=keywords)

    @property
    def is_empty(self) -> bool:
        return not self.tags and not self.keywords

    def matches(self, title: str, tag_names: list[str]) -> bool:
        """Check whether a question with this title and tags matches."""
        if self.is_empty:
            return True
        lowered_tags = {name.lower() for name in tag_names}
        if any(tag in lowered_tags for tag in self.tags):
            return True
        lowered_title = title.lower()
        return any(keyword in lowered_title for keyword in self.keywords)
