"""Create post use case."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.base import APIModel, BaseUseCase
from blog.application.usecase.post.presenter import PostPresenter, PostView
from blog.domain.repository import UnitOfWork
from blog.domain.service import PostMutationService
from blog.domain.value import UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: str  # Authenticated user ID
    # Raw body values, validated by the domain model
    title: Any = None
    content: Any = None
    tags: Any = None
    image: Any = None


class CreatePostResponse(APIModel):
    """Create post response."""

    message: str
    post: PostView


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a new post."""

    def __init__(
        self,
        post_mutation_service: PostMutationService,
        presenter: PostPresenter,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize create post use case.

        Args:
            post_mutation_service: Post mutation domain service
            presenter: Populates the author of the new post
            unit_of_work: Commits the change before it is presented
        """
        self.post_mutation_service = post_mutation_service
        self.presenter = presenter
        self.unit_of_work = unit_of_work

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            The created post, populated with its author

        Raises:
            ValidationError: If title, content, tags or image are invalid
        """
        post = await self.post_mutation_service.create_post(
            author_id=UserId(UUID(request.author_id)),
            title=request.title,
            content=request.content,
            tags=request.tags,
            image=request.image,
        )

        await self.unit_of_work.commit()

        return CreatePostResponse(
            message="Post created successfully",
            post=await self.presenter.present(post),
        )
