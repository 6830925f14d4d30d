"""User aggregate root.

Users are referenced by posts (author, likes, comments) and supply the
display fields shown when those references are populated.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import UserId, UserRole


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    name: str = Field(min_length=1, max_length=50)
    email: str = Field(min_length=3, max_length=255)
    avatar: Optional[str] = None
    role: UserRole = UserRole.USER
    # Unset for accounts provisioned without a password
    password_hash: Optional[str] = Field(default=None, repr=False)
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_admin(self) -> bool:
        """Whether the user has the admin role."""
        return self.role == UserRole.ADMIN
