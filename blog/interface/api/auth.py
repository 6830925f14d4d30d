"""Authentication guard for routes.

The bearer token is read from the ``Authorization: Bearer <token>`` header,
falling back to the ``auth_token`` cookie set by the frontend.
"""

from typing import Optional

from fastapi import HTTPException, Request, status

from blog.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from blog.util.jwt import JWTError

AUTH_COOKIE = "auth_token"


def extract_token(request: Request) -> Optional[str]:
    """Get the bearer token of a request, if any."""
    header = request.headers.get("Authorization")
    if header:
        scheme, _, token = header.partition(" ")
        if scheme.lower() == "bearer" and token.strip():
            return token.strip()
    return request.cookies.get(AUTH_COOKIE) or None


async def require_user(
    request: Request, get_current_user_use_case: GetCurrentUserUseCase
) -> GetCurrentUserResponse:
    """Resolve the authenticated user or reject the request.

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    token = extract_token(request)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )


async def optional_user(
    request: Request, get_current_user_use_case: GetCurrentUserUseCase
) -> Optional[GetCurrentUserResponse]:
    """Resolve the authenticated user; an invalid token counts as anonymous."""
    token = extract_token(request)
    if not token:
        return None

    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
    except JWTError:
        return None
