"""Comment entity.

Comments are embedded in their post and only ever appended.
"""

from datetime import datetime

from pydantic import Field, field_validator

from blog.domain.model.common import DomainModel, bounded_text
from blog.domain.value import CommentId, UserId

COMMENT_MAX_LENGTH = 500


class Comment(DomainModel):
    """A comment on a post."""

    id: CommentId
    user_id: UserId
    content: str
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator("content", mode="before")
    @classmethod
    def validate_content(cls, v: str) -> str:
        """Trim content and enforce 1-500 characters."""
        return bounded_text(v, "Comment", COMMENT_MAX_LENGTH)
