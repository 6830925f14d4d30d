"""Post routes."""

from typing import Any, Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Query, Request, status
from pydantic import BaseModel

from blog.application.usecase.auth import GetCurrentUserUseCase
from blog.application.usecase.post import (
    AddCommentRequest,
    AddCommentResponse,
    AddCommentUseCase,
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostUseCase,
)
from blog.application.usecase.tag import (
    PopularTagsRequest,
    PopularTagsResponse,
    PopularTagsUseCase,
)
from blog.config import TagSettings
from blog.domain.error import DomainError
from blog.interface.api.auth import optional_user, require_user
from blog.interface.api.errors import to_http_error

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post.

    Bounds are enforced by the domain so every problem is reported with the
    same field-level messages.
    """

    title: Any = None
    content: Any = None
    tags: Any = None
    image: Any = None


class AddCommentAPIRequest(BaseModel):
    """API request for adding a comment."""

    content: Any = None


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    page: int = Query(default=1),
    limit: Optional[int] = Query(default=None),
    search: Optional[str] = Query(default=None),
    tag: Optional[str] = Query(default=None),
    author: Optional[str] = Query(default=None),
) -> ListPostsResponse:
    """List published posts, newest first.

    Args:
        list_posts_use_case: List posts use case from DI
        page: 1-based page number
        limit: Page size (at most 100), the configured default when absent
        search: Case-insensitive text searched in title and content
        tag: Only posts carrying this tag
        author: Only posts by this user ID

    Returns:
        One page of posts with pagination metadata
    """
    try:
        return await list_posts_use_case.execute(
            ListPostsRequest(
                page=page, limit=limit, search=search, tag=tag, author=author
            )
        )
    except DomainError as e:
        raise to_http_error(e)


# Declared before "/{post_id}" so "tags" is not taken for a post ID
@router.get("/tags/popular", response_model=PopularTagsResponse)
async def popular_tags(
    popular_tags_use_case: FromDishka[PopularTagsUseCase],
    tag_settings: FromDishka[TagSettings],
) -> PopularTagsResponse:
    """Most used tags across published posts."""
    try:
        return await popular_tags_use_case.execute(
            PopularTagsRequest(limit=tag_settings.popular_limit)
        )
    except DomainError as e:
        raise to_http_error(e)


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: str,
    request: Request,
    get_post_use_case: FromDishka[GetPostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> GetPostResponse:
    """Get a single post with its comments.

    Authentication is optional. An authenticated read counts as a view.

    Args:
        post_id: Post UUID
        request: Incoming request, carries the optional bearer token
        get_post_use_case: Get post use case from DI
        get_current_user_use_case: Get current user use case from DI

    Returns:
        Populated post

    Raises:
        HTTPException: 404 if the post doesn't exist
    """
    user = await optional_user(request, get_current_user_use_case)

    try:
        return await get_post_use_case.execute(
            GetPostRequest(post_id=post_id, user_id=user.user_id if user else None)
        )
    except DomainError as e:
        raise to_http_error(e)


@router.post(
    "", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED
)
async def create_post(
    body: CreatePostAPIRequest,
    request: Request,
    create_post_use_case: FromDishka[CreatePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> CreatePostResponse:
    """Create a new post.

    Requires authentication. The caller becomes the author.

    Args:
        body: Post creation data
        request: Incoming request, carries the bearer token
        create_post_use_case: Create post use case from DI
        get_current_user_use_case: Get current user use case from DI

    Returns:
        Created post

    Raises:
        HTTPException: 401 if not authenticated, 400 if validation fails
    """
    user = await require_user(request, get_current_user_use_case)

    try:
        return await create_post_use_case.execute(
            CreatePostRequest(
                author_id=user.user_id,
                title=body.title,
                content=body.content,
                tags=body.tags,
                image=body.image,
            )
        )
    except DomainError as e:
        raise to_http_error(e)


@router.put("/{post_id}", response_model=UpdatePostResponse)
async def update_post(
    post_id: str,
    request: Request,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    changes: dict[str, Any] = Body(default_factory=dict),
) -> UpdatePostResponse:
    """Partially update a post.

    Only the fields present in the body change. Only the author or an
    admin may update a post.

    Args:
        post_id: Post UUID
        request: Incoming request, carries the bearer token
        update_post_use_case: Update post use case from DI
        get_current_user_use_case: Get current user use case from DI
        changes: Fields to change (title, content, tags, image, isPublished)

    Returns:
        Updated post

    Raises:
        HTTPException: 401, 403, 404 or 400
    """
    user = await require_user(request, get_current_user_use_case)

    try:
        return await update_post_use_case.execute(
            UpdatePostRequest(
                post_id=post_id,
                user_id=user.user_id,
                role=user.role,
                changes=changes,
            )
        )
    except DomainError as e:
        raise to_http_error(e)


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: str,
    request: Request,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> DeletePostResponse:
    """Delete a post. Only the author or an admin may delete it."""
    user = await require_user(request, get_current_user_use_case)

    try:
        return await delete_post_use_case.execute(
            DeletePostRequest(post_id=post_id, user_id=user.user_id, role=user.role)
        )
    except DomainError as e:
        raise to_http_error(e)


@router.post("/{post_id}/like", response_model=ToggleLikeResponse)
async def toggle_like(
    post_id: str,
    request: Request,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> ToggleLikeResponse:
    """Like a post, or remove the like if the caller already likes it."""
    user = await require_user(request, get_current_user_use_case)

    try:
        return await toggle_like_use_case.execute(
            ToggleLikeRequest(post_id=post_id, user_id=user.user_id)
        )
    except DomainError as e:
        raise to_http_error(e)


@router.post("/{post_id}/comments", response_model=AddCommentResponse)
async def add_comment(
    post_id: str,
    body: AddCommentAPIRequest,
    request: Request,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> AddCommentResponse:
    """Append a comment to a post.

    Args:
        post_id: Post UUID
        body: Comment content
        request: Incoming request, carries the bearer token
        add_comment_use_case: Add comment use case from DI
        get_current_user_use_case: Get current user use case from DI

    Returns:
        The post with the new comment last

    Raises:
        HTTPException: 401 if not authenticated, 404 or 400
    """
    user = await require_user(request, get_current_user_use_case)

    try:
        return await add_comment_use_case.execute(
            AddCommentRequest(
                post_id=post_id, user_id=user.user_id, content=body.content
            )
        )
    except DomainError as e:
        raise to_http_error(e)
