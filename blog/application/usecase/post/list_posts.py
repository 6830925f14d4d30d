"""List posts use case."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel

from blog.application.usecase.base import APIModel, BaseUseCase
from blog.application.usecase.post.presenter import PostPresenter, PostView
from blog.domain.error import ValidationError
from blog.domain.repository import PostFilter
from blog.domain.service import PostQueryService
from blog.domain.value import UserId


class ListPostsRequest(BaseModel):
    """List posts request."""

    page: int = 1
    limit: Optional[int] = None  # Configured default page size when absent
    search: Optional[str] = None  # Free text over title and content
    tag: Optional[str] = None  # Single tag
    author: Optional[str] = None  # Author user ID


class ListPostsResponse(APIModel):
    """List posts response."""

    posts: list[PostView]
    total_pages: int
    current_page: int
    total: int


class ListPostsUseCase(BaseUseCase):
    """Use case for listing published posts with search and pagination."""

    def __init__(
        self,
        post_query_service: PostQueryService,
        presenter: PostPresenter,
        default_limit: int = 10,
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_query_service: Post query domain service
            presenter: Populates authors and likers
            default_limit: Page size used when the request names none
        """
        self.post_query_service = post_query_service
        self.presenter = presenter
        self.default_limit = default_limit

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Empty ``search``/``tag``/``author`` values mean "no filter".

        Args:
            request: List posts request with filters and pagination

        Returns:
            One page of populated posts plus pagination metadata

        Raises:
            ValidationError: If pagination is out of range or the author ID is malformed
        """
        author_id = None
        if request.author:
            try:
                author_id = UserId(UUID(request.author))
            except ValueError:
                raise ValidationError.single("author", "Author must be a valid ID")

        post_filter = PostFilter(
            search=request.search.strip() if request.search else None,
            tag=request.tag.strip() if request.tag else None,
            author_id=author_id,
            published_only=True,
        )

        limit = self.default_limit if request.limit is None else request.limit
        page = await self.post_query_service.list_posts(
            post_filter, page=request.page, limit=limit
        )
        posts = await self.presenter.present_many(page.posts)

        logfire.debug("Posts presented", count=len(posts))
        return ListPostsResponse(
            posts=posts,
            total_pages=page.total_pages,
            current_page=page.current_page,
            total=page.total,
        )
