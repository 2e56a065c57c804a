"""Tag entity for categorizing questions."""

from qna.domain.model.common import DomainModel
from qna.domain.value import TagId, TagName


class Tag(DomainModel):
    """Tag entity.

    Tags are deduplicated by name through find-or-create rather than
    being declared up front. Questions may carry any number of tags.
    """

    id: TagId
    name: TagName
