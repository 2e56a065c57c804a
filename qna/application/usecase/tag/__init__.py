"""Tag use cases."""

from .list_tag_counts import ListTagCountsUseCase, TagCountResponse

__all__ = [
    "ListTagCountsUseCase",
    "TagCountResponse",
]
