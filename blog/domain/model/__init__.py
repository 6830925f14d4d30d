"""Domain model entities for the blog."""

from blog.domain.model.comment import Comment
from blog.domain.model.patch import PostPatch
from blog.domain.model.post import Post
from blog.domain.model.registration import Registration
from blog.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "PostPatch",
    "Registration",
    "Comment",
]
