"""Popular tags use case."""

from pydantic import BaseModel, Field

from blog.application.usecase.base import APIModel, BaseUseCase
from blog.domain.service import PostQueryService


class PopularTagsRequest(BaseModel):
    """Popular tags request."""

    limit: int = Field(default=10, ge=1)


class TagCountItem(APIModel):
    """Tag with the number of published posts carrying it."""

    tag: str
    count: int


class PopularTagsResponse(APIModel):
    """Popular tags response."""

    tags: list[TagCountItem]


class PopularTagsUseCase(BaseUseCase):
    """Use case for listing the most used tags across published posts."""

    def __init__(self, post_query_service: PostQueryService) -> None:
        """Initialize popular tags use case.

        Args:
            post_query_service: Post query domain service
        """
        self.post_query_service = post_query_service

    async def execute(self, request: PopularTagsRequest) -> PopularTagsResponse:
        """Execute popular tags flow.

        Args:
            request: Popular tags request

        Returns:
            At most ``limit`` tags, most used first
        """
        tag_counts = await self.post_query_service.popular_tags(request.limit)
        return PopularTagsResponse(
            tags=[TagCountItem(tag=tc.tag, count=tc.count) for tc in tag_counts]
        )
