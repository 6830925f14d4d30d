"""Login use case."""

from pydantic import BaseModel

from blog.application.usecase.auth.register import AuthResponse
from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.user.profile import AccountProfile
from blog.domain.service import JWTService, UserService


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginUseCase(BaseUseCase):
    """Use case for exchanging an email and password for a token."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Raises:
            InvalidCredentialsError: If the email or password is wrong
        """
        user = await self.user_service.authenticate(request.email, request.password)

        return AuthResponse(
            token=self.jwt_service.create_token(str(user.id), user.role),
            user=AccountProfile.from_user(user),
        )
