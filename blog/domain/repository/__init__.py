"""Repository interfaces for the blog domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from blog.domain.repository.post import PostFilter, PostRepository
from blog.domain.repository.unit_of_work import UnitOfWork
from blog.domain.repository.user import UserRepository

__all__ = [
    "PostFilter",
    "PostRepository",
    "UnitOfWork",
    "UserRepository",
]
