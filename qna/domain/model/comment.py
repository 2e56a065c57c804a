"""Comment entity.

Comments are short remarks attached to answers. They are never edited
or deleted once created.
"""

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.value import CommentId, Timestamp


class Comment(DomainModel):
    """Comment entity."""

    id: CommentId
    text: str = Field(min_length=1)
    commented_by: str = Field(min_length=1)  # Author username
    comment_date_time: Timestamp
