"""PostgreSQL repository implementations."""

from blog.persistence.repository.post import PostgresPostRepository
from blog.persistence.repository.unit_of_work import SqlAlchemyUnitOfWork
from blog.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresUserRepository",
    "SqlAlchemyUnitOfWork",
]
