"""Get post use case."""

from typing import Optional

from pydantic import BaseModel

from blog.application.usecase.base import APIModel, BaseUseCase
from blog.application.usecase.post.presenter import (
    PostPresenter,
    PostView,
    parse_post_id,
)
from blog.domain.repository import UnitOfWork
from blog.domain.service import PostQueryService


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str
    user_id: Optional[str] = None  # Current user ID (if authenticated)


class GetPostResponse(APIModel):
    """Get post response."""

    post: PostView


class GetPostUseCase(BaseUseCase):
    """Use case for reading a single post.

    Authenticated reads count as a view: the post's view counter is
    incremented and the response reflects the new count. Anonymous reads
    never change the post.
    """

    def __init__(
        self,
        post_query_service: PostQueryService,
        presenter: PostPresenter,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize get post use case.

        Args:
            post_query_service: Post query domain service
            presenter: Populates authors, likers and comment authors
            unit_of_work: Commits a recorded view
        """
        self.post_query_service = post_query_service
        self.presenter = presenter
        self.unit_of_work = unit_of_work

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Args:
            request: Get post request with post ID and optional user ID

        Returns:
            Populated post

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post_id = parse_post_id(request.post_id)

        if request.user_id:
            post = await self.post_query_service.record_view(post_id)
            await self.unit_of_work.commit()
        else:
            post = await self.post_query_service.get_post(post_id)

        return GetPostResponse(
            post=await self.presenter.present(post, include_comment_authors=True)
        )
