"""Delete post use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.base import APIModel, BaseUseCase
from blog.application.usecase.post.presenter import parse_post_id
from blog.domain.repository import UnitOfWork
from blog.domain.service import PostMutationService
from blog.domain.value import Caller, UserId, UserRole


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    user_id: str  # Current user ID (must be author or admin)
    role: UserRole = UserRole.USER


class DeletePostResponse(APIModel):
    """Delete post response."""

    message: str


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting a post together with its likes and comments."""

    def __init__(
        self, post_mutation_service: PostMutationService, unit_of_work: UnitOfWork
    ) -> None:
        self.post_mutation_service = post_mutation_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the caller is neither author nor admin
        """
        await self.post_mutation_service.delete_post(
            parse_post_id(request.post_id),
            Caller(user_id=UserId(UUID(request.user_id)), role=request.role),
        )
        await self.unit_of_work.commit()
        return DeletePostResponse(message="Post deleted successfully")
