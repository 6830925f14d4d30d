"""Domain value objects for the blog."""

from blog.domain.value.identifiers import CommentId, PostId, UserId
from blog.domain.value.types import Caller, TagCount, UserRole

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    # Types
    "Caller",
    "TagCount",
    "UserRole",
]
