"""Public user profile shared by the user use cases."""

from datetime import datetime
from typing import Optional

from blog.application.usecase.base import APIModel
from blog.domain.model.user import User
from blog.domain.value import UserRole


class UserProfile(APIModel):
    """User as returned by the API. Email and credentials stay private."""

    id: str
    name: str
    avatar: Optional[str]
    role: UserRole
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserProfile":
        return cls(
            id=str(user.id),
            name=user.name,
            avatar=user.avatar,
            role=user.role,
            created_at=user.created_at,
        )


class AccountProfile(UserProfile):
    """The caller's own account, which includes their email."""

    email: str

    @classmethod
    def from_user(cls, user: User) -> "AccountProfile":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            avatar=user.avatar,
            role=user.role,
            created_at=user.created_at,
        )
