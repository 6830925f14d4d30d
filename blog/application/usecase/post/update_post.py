"""Update post use case."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from blog.application.usecase.base import APIModel, BaseUseCase
from blog.application.usecase.post.presenter import (
    PostPresenter,
    PostView,
    parse_post_id,
)
from blog.domain.error import ValidationError
from blog.domain.model.patch import PostPatch
from blog.domain.repository import UnitOfWork
from blog.domain.service import PostMutationService
from blog.domain.value import Caller, UserId, UserRole


class UpdatePostRequest(BaseModel):
    """Update post request."""

    post_id: str
    user_id: str  # Current user ID (must be author or admin)
    role: UserRole = UserRole.USER
    # Only the keys present are changed; values may be empty or null
    changes: dict[str, Any] = Field(default_factory=dict)


class UpdatePostResponse(APIModel):
    """Update post response."""

    message: str
    post: PostView


class UpdatePostUseCase(BaseUseCase):
    """Use case for partially updating a post."""

    def __init__(
        self,
        post_mutation_service: PostMutationService,
        presenter: PostPresenter,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize update post use case.

        Args:
            post_mutation_service: Post mutation domain service
            presenter: Populates the updated post
            unit_of_work: Commits the change before it is presented
        """
        self.post_mutation_service = post_mutation_service
        self.presenter = presenter
        self.unit_of_work = unit_of_work

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Steps:
        1. Validate the present fields into a patch
        2. Check the post exists and the caller may modify it
        3. Apply the patch and save

        Args:
            request: Update post request with post ID, caller and changes

        Returns:
            The updated post

        Raises:
            ValidationError: If a present field is invalid
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the caller is neither author nor admin
        """
        post_id = parse_post_id(request.post_id)
        caller = Caller(user_id=UserId(UUID(request.user_id)), role=request.role)

        try:
            patch = PostPatch.model_validate(request.changes)
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e)

        post = await self.post_mutation_service.update_post(post_id, caller, patch)

        await self.unit_of_work.commit()

        return UpdatePostResponse(
            message="Post updated successfully",
            post=await self.presenter.present(post),
        )
