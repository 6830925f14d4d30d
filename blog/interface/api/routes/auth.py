"""Account routes: sign up and log in."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status
from pydantic import BaseModel

from blog.application.usecase.auth import (
    AuthResponse,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from blog.config import Settings
from blog.domain.error import DomainError
from blog.interface.api.auth import AUTH_COOKIE
from blog.interface.api.errors import to_http_error

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


class RegisterAPIRequest(BaseModel):
    """API request for registering.

    Checked by the domain so every invalid field is reported at once.
    """

    name: Any = None
    email: Any = None
    password: Any = None


class LoginAPIRequest(BaseModel):
    """API request for logging in."""

    email: str
    password: str


def _set_auth_cookie(response: Response, token: str, settings: Settings) -> None:
    # Lets the browser frontend authenticate without handling the token
    response.set_cookie(
        AUTH_COOKIE,
        token,
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
        httponly=True,
        samesite="lax",
        secure=settings.environment == "production",
    )


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    body: RegisterAPIRequest,
    response: Response,
    register_use_case: FromDishka[RegisterUseCase],
    settings: FromDishka[Settings],
) -> AuthResponse:
    """Create an account and log it in.

    Args:
        body: Name, email and password (at least 6 characters)
        response: Outgoing response, receives the auth cookie
        register_use_case: Register use case from DI
        settings: Application settings, for the cookie attributes

    Returns:
        Token and the new account

    Raises:
        HTTPException: 400 if a field is invalid or the email is taken
    """
    try:
        result = await register_use_case.execute(
            RegisterRequest(name=body.name, email=body.email, password=body.password)
        )
    except DomainError as e:
        raise to_http_error(e)

    _set_auth_cookie(response, result.token, settings)
    return result


@router.post("/login", response_model=AuthResponse)
async def login(
    body: LoginAPIRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> AuthResponse:
    """Exchange an email and password for a token.

    Raises:
        HTTPException: 401 if the email or password is wrong
    """
    try:
        result = await login_use_case.execute(
            LoginRequest(email=body.email, password=body.password)
        )
    except DomainError as e:
        raise to_http_error(e)

    _set_auth_cookie(response, result.token, settings)
    return result
