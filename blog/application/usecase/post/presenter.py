"""Populated views of posts.

Posts store bare user IDs for their author, likers and commenters. The
presenter joins them against the user directory at read time and never
writes the display fields back to the post.
"""

from datetime import datetime
from typing import Iterable, Optional
from uuid import UUID

from blog.application.usecase.base import APIModel
from blog.domain.error import NotFoundError
from blog.domain.model.post import Post
from blog.domain.model.user import User
from blog.domain.service import UserService
from blog.domain.value import PostId, UserId


class UserSummary(APIModel):
    """Display fields of a referenced user."""

    id: str
    name: Optional[str] = None
    avatar: Optional[str] = None


class LikerSummary(APIModel):
    """Display fields of a user who likes a post.

    ``name`` is null when the liker is no longer in the user directory.
    """

    id: str
    name: Optional[str] = None


class CommentView(APIModel):
    """Comment with its author populated."""

    id: str
    user: UserSummary
    content: str
    created_at: datetime


class PostView(APIModel):
    """Post with author, likers and (optionally) comment authors populated."""

    id: str
    title: str
    content: str
    author: Optional[UserSummary]
    tags: list[str]
    image: Optional[str]
    is_published: bool
    likes: list[LikerSummary]
    like_count: int
    comments: list[CommentView]
    comment_count: int
    view_count: int
    created_at: datetime
    updated_at: datetime


def parse_post_id(raw: str) -> PostId:
    """Parse a post ID from a request.

    A malformed ID can't resolve to a post, so it is reported as not found.

    Raises:
        NotFoundError: If the ID is not a valid UUID
    """
    try:
        return PostId(UUID(raw))
    except (ValueError, TypeError):
        raise NotFoundError("Post", raw)


class PostPresenter:
    """Builds populated post views from posts and the user directory."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize post presenter.

        Args:
            user_service: User domain service (the user directory)
        """
        self.user_service = user_service

    async def present(
        self, post: Post, include_comment_authors: bool = True
    ) -> PostView:
        """Populate a single post.

        Args:
            post: Post to render
            include_comment_authors: Whether to resolve comment authors too

        Returns:
            Populated post view
        """
        views = await self.present_many([post], include_comment_authors)
        return views[0]

    async def present_many(
        self, posts: list[Post], include_comment_authors: bool = False
    ) -> list[PostView]:
        """Populate several posts with a single directory lookup.

        Args:
            posts: Posts to render, order is kept
            include_comment_authors: Whether to resolve comment authors too

        Returns:
            Populated post views
        """
        directory = await self.user_service.get_directory(
            self._referenced_users(posts, include_comment_authors)
        )
        return [
            self._render(post, directory, include_comment_authors) for post in posts
        ]

    @staticmethod
    def _referenced_users(
        posts: list[Post], include_comment_authors: bool
    ) -> Iterable[UserId]:
        for post in posts:
            yield post.author_id
            yield from post.likes
            if include_comment_authors:
                yield from (comment.user_id for comment in post.comments)

    @staticmethod
    def _render(
        post: Post, directory: dict[UserId, User], include_comment_authors: bool
    ) -> PostView:
        author = directory.get(post.author_id)

        # Every like is listed, so the list always matches like_count
        likes = []
        for user_id in post.likes:
            liker = directory.get(user_id)
            likes.append(
                LikerSummary(id=str(user_id), name=liker.name if liker else None)
            )

        comments = []
        for comment in post.comments:
            commenter = (
                directory.get(comment.user_id) if include_comment_authors else None
            )
            comments.append(
                CommentView(
                    id=str(comment.id),
                    user=UserSummary(
                        id=str(comment.user_id),
                        name=commenter.name if commenter else None,
                        avatar=commenter.avatar if commenter else None,
                    ),
                    content=comment.content,
                    created_at=comment.created_at,
                )
            )

        return PostView(
            id=str(post.id),
            title=post.title,
            content=post.content,
            author=(
                UserSummary(id=str(author.id), name=author.name, avatar=author.avatar)
                if author
                else None
            ),
            tags=post.tags,
            image=post.image,
            is_published=post.is_published,
            likes=likes,
            like_count=post.like_count,
            comments=comments,
            comment_count=post.comment_count,
            view_count=post.view_count,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
