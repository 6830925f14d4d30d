"""Domain layer DI providers."""

from dishka import Scope, provide

from blog.config import AuthSettings, PaginationSettings
from blog.domain.repository import PostRepository, UserRepository
from blog.domain.service import (
    JWTService,
    PostMutationService,
    PostQueryService,
    UserService,
)
from blog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_post_query_service(
        self, post_repository: PostRepository, pagination: PaginationSettings
    ) -> PostQueryService:
        """Provide post query domain service."""
        return PostQueryService(
            post_repository=post_repository, max_limit=pagination.max_limit
        )

    @provide
    def get_post_mutation_service(
        self, post_repository: PostRepository
    ) -> PostMutationService:
        """Provide post mutation domain service."""
        return PostMutationService(post_repository=post_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)
