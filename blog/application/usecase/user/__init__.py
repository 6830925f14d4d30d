"""User use cases."""

from .get_user import GetUserRequest, GetUserResponse, GetUserUseCase
from .list_users import ListUsersRequest, ListUsersResponse, ListUsersUseCase
from .profile import AccountProfile, UserProfile

__all__ = [
    "AccountProfile",
    "GetUserRequest",
    "GetUserResponse",
    "GetUserUseCase",
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
    "UserProfile",
]
