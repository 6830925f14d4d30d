"""Post aggregate root.

Posts carry their likes and comments embedded, so every mutation is a
single-document update. Like and comment counts are always derived from
the embedded lists and never stored.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, HttpUrl, TypeAdapter, field_validator

from blog.domain.model.comment import Comment
from blog.domain.model.common import DomainModel, bounded_text
from blog.domain.value import Caller, PostId, UserId

TITLE_MAX_LENGTH = 100
CONTENT_MAX_LENGTH = 5000

_http_url = TypeAdapter(HttpUrl)


def normalize_tags(v: Any) -> list[str]:
    """Trim tags and reject blank ones. Order is preserved."""
    if not isinstance(v, (list, tuple)):
        raise ValueError("Tags must be an array")
    tags = []
    for tag in v:
        if not isinstance(tag, str) or not tag.strip():
            raise ValueError("Tags must be non-empty strings")
        tags.append(tag.strip())
    return tags


def normalize_image(v: Any) -> Optional[str]:
    """Accept an http(s) URL; an empty value means no image."""
    if v is None or (isinstance(v, str) and not v.strip()):
        return None
    try:
        _http_url.validate_python(v)
    except ValueError:
        raise ValueError("Image must be a valid URL")
    return v.strip()


class Post(DomainModel):
    """Post aggregate root.

    Ownership is decided solely by ``author_id``; admins bypass it.
    """

    id: PostId
    title: str
    content: str
    author_id: UserId
    tags: list[str] = Field(default_factory=list)
    image: Optional[str] = None
    is_published: bool = True
    likes: list[UserId] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    view_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("title", mode="before")
    @classmethod
    def validate_title(cls, v: Any) -> str:
        """Trim the title and enforce 1-100 characters."""
        return bounded_text(v, "Title", TITLE_MAX_LENGTH)

    @field_validator("content", mode="before")
    @classmethod
    def validate_content(cls, v: Any) -> str:
        """Trim the content and enforce 1-5000 characters."""
        return bounded_text(v, "Content", CONTENT_MAX_LENGTH)

    @field_validator("tags", mode="before")
    @classmethod
    def validate_tags(cls, v: Any) -> list[str]:
        """Tags default to an empty list."""
        return [] if v is None else normalize_tags(v)

    @field_validator("image", mode="before")
    @classmethod
    def validate_image(cls, v: Any) -> Optional[str]:
        return normalize_image(v)

    @field_validator("likes")
    @classmethod
    def validate_likes_unique(cls, v: list[UserId]) -> list[UserId]:
        """A user appears at most once in likes."""
        if len(set(v)) != len(v):
            raise ValueError("A user can like a post only once")
        return v

    @property
    def like_count(self) -> int:
        """Number of users who like the post."""
        return len(self.likes)

    @property
    def comment_count(self) -> int:
        """Number of comments on the post."""
        return len(self.comments)

    def is_liked_by(self, user_id: UserId) -> bool:
        """Whether the given user likes the post."""
        return user_id in self.likes

    def can_be_modified_by(self, caller: Caller) -> bool:
        """Whether the caller may update or delete the post."""
        return caller.is_admin or caller.user_id == self.author_id

    def with_changes(self, **changes: Any) -> "Post":
        """Return a validated copy of the post with the given fields replaced.

        Unlike ``model_copy(update=...)`` this runs every field validator, so
        the title/content bounds hold after any mutation.

        Raises:
            pydantic.ValidationError: If a changed field is invalid
        """
        data = self.model_dump()
        data.update(changes)
        return Post.model_validate(data)

    def with_like_toggled(self, user_id: UserId) -> tuple["Post", bool]:
        """Toggle the user's like.

        Returns:
            The updated post and whether the user now likes it
        """
        if self.is_liked_by(user_id):
            likes = [liker for liker in self.likes if liker != user_id]
            liked = False
        else:
            likes = [*self.likes, user_id]
            liked = True
        return self.with_changes(likes=likes, updated_at=datetime.now()), liked

    def with_comment(self, comment: Comment) -> "Post":
        """Return the post with the comment appended at the end."""
        return self.with_changes(
            comments=[*self.comments, comment], updated_at=datetime.now()
        )
