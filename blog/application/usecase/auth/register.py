"""Register use case."""

from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from blog.application.usecase.base import APIModel, BaseUseCase
from blog.application.usecase.user.profile import AccountProfile
from blog.domain.error import ValidationError
from blog.domain.model.registration import Registration
from blog.domain.repository import UnitOfWork
from blog.domain.service import JWTService, UserService


class RegisterRequest(BaseModel):
    """Register request."""

    # Raw body values, validated by the domain model
    name: Any = None
    email: Any = None
    password: Any = None


class AuthResponse(APIModel):
    """Token for the account together with the account itself."""

    token: str
    user: AccountProfile


class RegisterUseCase(BaseUseCase):
    """Use case for signing up with a name, email and password."""

    def __init__(
        self,
        user_service: UserService,
        jwt_service: JWTService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            jwt_service: Issues the token for the new account
            unit_of_work: Commits the account before the token is returned
        """
        self.user_service = user_service
        self.jwt_service = jwt_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Execute register flow.

        Steps:
        1. Validate name, email and password
        2. Create the account with a hashed password
        3. Commit, then issue a token for the new account

        Raises:
            ValidationError: If a field is invalid or the email is taken
        """
        try:
            registration = Registration(
                name=request.name, email=request.email, password=request.password
            )
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e)

        user = await self.user_service.register(registration)
        await self.unit_of_work.commit()

        return AuthResponse(
            token=self.jwt_service.create_token(str(user.id), user.role),
            user=AccountProfile.from_user(user),
        )
