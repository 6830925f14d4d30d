"""Domain services."""

from .base import Service
from .jwt_service import JWTService
from .post_mutation_service import PostMutationService
from .post_query_service import PostPage, PostQueryService
from .user_service import UserService

__all__ = [
    "JWTService",
    "PostMutationService",
    "PostPage",
    "PostQueryService",
    "Service",
    "UserService",
]
