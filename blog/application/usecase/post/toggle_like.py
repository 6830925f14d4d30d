"""Toggle like use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.base import APIModel, BaseUseCase
from blog.application.usecase.post.presenter import (
    PostPresenter,
    PostView,
    parse_post_id,
)
from blog.domain.repository import UnitOfWork
from blog.domain.service import PostMutationService
from blog.domain.value import UserId


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    post_id: str
    user_id: str  # User toggling their like


class ToggleLikeResponse(APIModel):
    """Toggle like response."""

    message: str
    liked: bool
    post: PostView


class ToggleLikeUseCase(BaseUseCase):
    """Use case for liking or unliking a post.

    Applying it twice for the same user leaves the likes as they were.
    """

    def __init__(
        self,
        post_mutation_service: PostMutationService,
        presenter: PostPresenter,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize toggle like use case.

        Args:
            post_mutation_service: Post mutation domain service
            presenter: Populates the post with its likers
            unit_of_work: Commits the toggle
        """
        self.post_mutation_service = post_mutation_service
        self.presenter = presenter
        self.unit_of_work = unit_of_work

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Args:
            request: Toggle like request with post ID and user ID

        Returns:
            Whether the user now likes the post, and the updated post

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post, liked = await self.post_mutation_service.toggle_like(
            parse_post_id(request.post_id), UserId(UUID(request.user_id))
        )

        await self.unit_of_work.commit()

        return ToggleLikeResponse(
            message="Post liked" if liked else "Post unliked",
            liked=liked,
            post=await self.presenter.present(post),
        )
