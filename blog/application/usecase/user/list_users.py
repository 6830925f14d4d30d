"""List users use case."""

import math
from typing import Optional

from pydantic import BaseModel

from blog.application.usecase.base import APIModel, BaseUseCase
from blog.application.usecase.user.profile import UserProfile
from blog.domain.error import FieldError, ValidationError
from blog.domain.service import UserService


class ListUsersRequest(BaseModel):
    """List users request."""

    page: int = 1
    limit: Optional[int] = None  # Configured default page size when absent


class ListUsersResponse(APIModel):
    """List users response."""

    users: list[UserProfile]
    total_pages: int
    current_page: int
    total: int


class ListUsersUseCase(BaseUseCase):
    """Use case for the admin user directory, newest accounts first."""

    def __init__(
        self, user_service: UserService, default_limit: int = 10, max_limit: int = 100
    ) -> None:
        """Initialize list users use case.

        Args:
            user_service: User domain service
            default_limit: Page size used when the request names none
            max_limit: Largest page size accepted
        """
        self.user_service = user_service
        self.default_limit = default_limit
        self.max_limit = max_limit

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        """Execute list users flow.

        Raises:
            ValidationError: If page or limit is out of range
        """
        limit = self.default_limit if request.limit is None else request.limit

        errors = []
        if request.page < 1:
            errors.append(FieldError(field="page", message="Page must be at least 1"))
        if not 1 <= limit <= self.max_limit:
            errors.append(
                FieldError(
                    field="limit",
                    message=f"Limit must be between 1 and {self.max_limit}",
                )
            )
        if errors:
            raise ValidationError(errors)

        users, total = await self.user_service.list_users(
            limit=limit, offset=(request.page - 1) * limit
        )

        return ListUsersResponse(
            users=[UserProfile.from_user(user) for user in users],
            total_pages=math.ceil(total / limit),
            current_page=request.page,
            total=total,
        )
