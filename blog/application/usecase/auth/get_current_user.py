"""Get current user use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import JWTService, UserService
from blog.domain.value import Caller, UserId, UserRole
from blog.util.jwt import JWTError


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserResponse(BaseModel):
    """Authenticated user attached to a request."""

    user_id: str
    name: str
    role: UserRole

    @property
    def caller(self) -> Caller:
        """The user as seen by the domain services."""
        return Caller(user_id=UserId(UUID(self.user_id)), role=self.role)


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for resolving the user behind a bearer token."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Load the user named by the token
        3. Return the user's ID, name and current role

        The role is read from the stored user rather than the token, so a
        demotion takes effect without waiting for the token to expire.

        Args:
            request: Request with JWT token

        Returns:
            The authenticated user

        Raises:
            JWTError: If the token is invalid, expired or names no user
        """
        payload = self.jwt_service.verify_token(request.token)

        try:
            user_id = UserId(UUID(payload.user_id))
        except ValueError:
            raise JWTError("Invalid token")

        user = await self.user_service.find_by_id(user_id)
        if user is None:
            raise JWTError("User no longer exists")

        return GetCurrentUserResponse(
            user_id=str(user.id), name=user.name, role=user.role
        )
