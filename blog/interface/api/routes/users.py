"""User directory routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, Request, status

from blog.application.usecase.auth import GetCurrentUserUseCase
from blog.application.usecase.user import (
    GetUserRequest,
    GetUserResponse,
    GetUserUseCase,
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
)
from blog.domain.error import DomainError
from blog.domain.value import UserRole
from blog.interface.api.auth import require_user
from blog.interface.api.errors import to_http_error

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("", response_model=ListUsersResponse)
async def list_users(
    request: Request,
    list_users_use_case: FromDishka[ListUsersUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    page: int = Query(default=1),
    limit: Optional[int] = Query(default=None),
) -> ListUsersResponse:
    """List users, newest accounts first.

    Admin only.

    Raises:
        HTTPException: 401 if not authenticated, 403 if not an admin
    """
    user = await require_user(request, get_current_user_use_case)
    if user.role != UserRole.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )

    try:
        return await list_users_use_case.execute(
            ListUsersRequest(page=page, limit=limit)
        )
    except DomainError as e:
        raise to_http_error(e)


@router.get("/{user_id}", response_model=GetUserResponse)
async def get_user(
    user_id: str,
    request: Request,
    get_user_use_case: FromDishka[GetUserUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> GetUserResponse:
    """Get a user's public profile.

    Args:
        user_id: User UUID
        request: Incoming request, carries the bearer token
        get_user_use_case: Get user use case from DI
        get_current_user_use_case: Get current user use case from DI

    Returns:
        Public profile (no email)

    Raises:
        HTTPException: 401 if not authenticated, 404 if the user doesn't exist
    """
    await require_user(request, get_current_user_use_case)

    try:
        return await get_user_use_case.execute(GetUserRequest(user_id=user_id))
    except DomainError as e:
        raise to_http_error(e)
