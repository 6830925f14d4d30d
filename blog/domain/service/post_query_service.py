"""Post query domain service.

Read side of the posts resource: filtered pagination, single-post reads
(with the view counter side effect) and tag aggregation.
"""

import math

import logfire
from pydantic import Field

from blog.domain.error import FieldError, NotFoundError, ValidationError
from blog.domain.model.common import DomainModel
from blog.domain.model.post import Post
from blog.domain.repository import PostFilter, PostRepository
from blog.domain.value import PostId, TagCount

from .base import Service


class PostPage(DomainModel):
    """One page of a post listing plus pagination metadata."""

    posts: list[Post]
    total: int = Field(ge=0)
    total_pages: int = Field(ge=0)
    current_page: int = Field(ge=1)


class PostQueryService(Service):
    """Domain service for reading posts."""

    def __init__(self, post_repository: PostRepository, max_limit: int = 100) -> None:
        """Initialize post query service.

        Args:
            post_repository: Post repository
            max_limit: Largest page size a caller may request
        """
        self.post_repository = post_repository
        self.max_limit = max_limit

    async def list_posts(
        self, post_filter: PostFilter, page: int = 1, limit: int = 10
    ) -> PostPage:
        """List one page of posts matching a filter, newest first.

        A page beyond the last one is empty, not an error.

        Args:
            post_filter: Search/tag/author predicate
            page: 1-based page number
            limit: Page size

        Returns:
            The page with total count and total pages

        Raises:
            ValidationError: If page or limit is out of range
        """
        errors = []
        if page < 1:
            errors.append(FieldError(field="page", message="Page must be at least 1"))
        if limit < 1 or limit > self.max_limit:
            errors.append(
                FieldError(
                    field="limit",
                    message=f"Limit must be between 1 and {self.max_limit}",
                )
            )
        if errors:
            raise ValidationError(errors)

        with logfire.span(
            "post_query_service.list_posts",
            search=post_filter.search,
            tag=post_filter.tag,
            author_id=str(post_filter.author_id) if post_filter.author_id else None,
            page=page,
            limit=limit,
        ):
            total = await self.post_repository.count(post_filter)
            posts = await self.post_repository.find_all(
                post_filter, limit=limit, offset=(page - 1) * limit
            )

            logfire.info("Posts listed", count=len(posts), total=total)
            return PostPage(
                posts=posts,
                total=total,
                total_pages=math.ceil(total / limit),
                current_page=page,
            )

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            The post

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("post_query_service.get_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            return post

    async def record_view(self, post_id: PostId) -> Post:
        """Count one view of a post by an authenticated reader.

        This is the one read-path operation with a write side effect: the
        view counter goes up by exactly 1 and the updated post is returned.

        Args:
            post_id: Post ID

        Returns:
            The post with its incremented view count

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("post_query_service.record_view", post_id=str(post_id)):
            post = await self.post_repository.increment_view_count(post_id)

            if not post:
                logfire.warn("View on non-existent post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            logfire.info(
                "Post view recorded", post_id=str(post_id), view_count=post.view_count
            )
            return post

    async def popular_tags(self, limit: int = 10) -> list[TagCount]:
        """Most used tags across published posts.

        Args:
            limit: Maximum number of tags

        Returns:
            Tags with their usage counts, most used first
        """
        with logfire.span("post_query_service.popular_tags", limit=limit):
            tags = await self.post_repository.popular_tags(limit=limit)
            logfire.info("Popular tags aggregated", count=len(tags))
            return tags
