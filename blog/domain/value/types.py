"""Domain value objects for the blog.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from blog.domain.value.common import ValueObject
from blog.domain.value.identifiers import UserId


class UserRole(str, Enum):
    """Role of a user account."""

    USER = "user"
    ADMIN = "admin"


class Caller(ValueObject):
    """Identity of the authenticated user making a request.

    Supplied by the authorization guard. Ownership checks compare
    ``user_id`` against a post's author; admins bypass them.
    """

    user_id: UserId
    role: UserRole = UserRole.USER

    @property
    def is_admin(self) -> bool:
        """Whether the caller has the admin role."""
        return self.role == UserRole.ADMIN


class TagCount(ValueObject):
    """Usage count of a single tag across published posts."""

    tag: str
    count: int
