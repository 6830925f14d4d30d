"""Get user use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.base import APIModel, BaseUseCase
from blog.application.usecase.user.profile import UserProfile
from blog.domain.error import NotFoundError
from blog.domain.service import UserService
from blog.domain.value import UserId


class GetUserRequest(BaseModel):
    """Get user request."""

    user_id: str  # UUID string


class GetUserResponse(APIModel):
    """Get user response."""

    user: UserProfile


class GetUserUseCase(BaseUseCase):
    """Use case for reading a user's profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> GetUserResponse:
        """Execute get user flow.

        Raises:
            NotFoundError: If the ID is malformed or the user doesn't exist
        """
        try:
            user_id = UserId(UUID(request.user_id))
        except ValueError:
            raise NotFoundError("User", request.user_id)

        user = await self.user_service.get_by_id(user_id)
        return GetUserResponse(user=UserProfile.from_user(user))
