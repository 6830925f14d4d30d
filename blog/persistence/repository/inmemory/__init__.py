"""In-memory repository implementations for testing."""

from .post import InMemoryPostRepository
from .unit_of_work import InMemoryUnitOfWork
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryPostRepository",
    "InMemoryUnitOfWork",
    "InMemoryUserRepository",
]
