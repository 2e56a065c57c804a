"""Question aggregate root.

Questions carry their tags and answers by id only.
"""

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.value import AnswerId, QuestionId, TagId, Timestamp


class Question(DomainModel):
    """Question aggregate root."""

    id: QuestionId
    title: str = Field(min_length=1)
    text: str = Field(min_length=1)
    tags: list[TagId] = Field(default_factory=list)
    asked_by: str = Field(min_length=1)  # Author username
    ask_date_time: Timestamp
    views: int = Field(default=0, ge=0)
    answers: list[AnswerId] = Field(default_factory=list)
