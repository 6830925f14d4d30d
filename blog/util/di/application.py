"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from blog.application.usecase.post import (
    AddCommentUseCase,
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    PostPresenter,
    ToggleLikeUseCase,
    UpdatePostUseCase,
)
from blog.application.usecase.tag import PopularTagsUseCase
from blog.application.usecase.user import GetUserUseCase, ListUsersUseCase
from blog.config import PaginationSettings
from blog.domain.repository import UnitOfWork
from blog.domain.service import (
    JWTService,
    PostMutationService,
    PostQueryService,
    UserService,
)
from blog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide
    def get_post_presenter(self, user_service: UserService) -> PostPresenter:
        """Provide post presenter."""
        return PostPresenter(user_service=user_service)

    # Auth use cases
    @provide
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            jwt_service=jwt_service, user_service=user_service
        )

    @provide
    def get_register_use_case(
        self,
        user_service: UserService,
        jwt_service: JWTService,
        unit_of_work: UnitOfWork,
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(
            user_service=user_service,
            jwt_service=jwt_service,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    # Post use cases
    @provide
    def get_list_posts_use_case(
        self,
        post_query_service: PostQueryService,
        presenter: PostPresenter,
        pagination: PaginationSettings,
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            post_query_service=post_query_service,
            presenter=presenter,
            default_limit=pagination.default_limit,
        )

    @provide
    def get_get_post_use_case(
        self,
        post_query_service: PostQueryService,
        presenter: PostPresenter,
        unit_of_work: UnitOfWork,
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(
            post_query_service=post_query_service,
            presenter=presenter,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_create_post_use_case(
        self,
        post_mutation_service: PostMutationService,
        presenter: PostPresenter,
        unit_of_work: UnitOfWork,
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_mutation_service=post_mutation_service,
            presenter=presenter,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_update_post_use_case(
        self,
        post_mutation_service: PostMutationService,
        presenter: PostPresenter,
        unit_of_work: UnitOfWork,
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(
            post_mutation_service=post_mutation_service,
            presenter=presenter,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_delete_post_use_case(
        self, post_mutation_service: PostMutationService, unit_of_work: UnitOfWork
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(
            post_mutation_service=post_mutation_service, unit_of_work=unit_of_work
        )

    @provide
    def get_toggle_like_use_case(
        self,
        post_mutation_service: PostMutationService,
        presenter: PostPresenter,
        unit_of_work: UnitOfWork,
    ) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(
            post_mutation_service=post_mutation_service,
            presenter=presenter,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_add_comment_use_case(
        self,
        post_mutation_service: PostMutationService,
        presenter: PostPresenter,
        unit_of_work: UnitOfWork,
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(
            post_mutation_service=post_mutation_service,
            presenter=presenter,
            unit_of_work=unit_of_work,
        )

    # Tag use cases
    @provide
    def get_popular_tags_use_case(
        self, post_query_service: PostQueryService
    ) -> PopularTagsUseCase:
        """Provide popular tags use case."""
        return PopularTagsUseCase(post_query_service=post_query_service)

    # User use cases
    @provide
    def get_get_user_use_case(self, user_service: UserService) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_service=user_service)

    @provide
    def get_list_users_use_case(
        self, user_service: UserService, pagination: PaginationSettings
    ) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(
            user_service=user_service,
            default_limit=pagination.default_limit,
            max_limit=pagination.max_limit,
        )
