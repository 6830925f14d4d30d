"""Add comment use case."""

from typing import Any
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


class AddCommentRequest(BaseModel):
    """Add comment request."""

    post_id: str
    user_id: str  # Commenting user
    content: Any = None  # Validated by the domain model


class AddCommentResponse(APIModel):
    """Add comment response."""

    message: str
    post: PostView


class AddCommentUseCase(BaseUseCase):
    """Use case for appending a comment to a post."""

    def __init__(
        self,
        post_mutation_service: PostMutationService,
        presenter: PostPresenter,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize add comment use case.

        Args:
            post_mutation_service: Post mutation domain service
            presenter: Populates the post including its comment authors
            unit_of_work: Commits the new comment
        """
        self.post_mutation_service = post_mutation_service
        self.presenter = presenter
        self.unit_of_work = unit_of_work

    async def execute(self, request: AddCommentRequest) -> AddCommentResponse:
        """Execute add comment flow.

        Args:
            request: Add comment request with post ID, user ID and content

        Returns:
            The post with the new comment as its last comment

        Raises:
            ValidationError: If the content is empty or longer than 500 characters
            NotFoundError: If the post doesn't exist
        """
        post = await self.post_mutation_service.add_comment(
            parse_post_id(request.post_id),
            UserId(UUID(request.user_id)),
            request.content,
        )

        await self.unit_of_work.commit()

        return AddCommentResponse(
            message="Comment added successfully",
            post=await self.presenter.present(post, include_comment_authors=True),
        )
