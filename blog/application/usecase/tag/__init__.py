"""Tag use cases."""

from .popular_tags import (
    PopularTagsRequest,
    PopularTagsResponse,
    PopularTagsUseCase,
    TagCountItem,
)

__all__ = [
    "PopularTagsRequest",
    "PopularTagsResponse",
    "PopularTagsUseCase",
    "TagCountItem",
]
