"""PostgreSQL implementation of User repository."""

from typing import Iterable, List, Optional

from sqlalchemy import desc, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import User
from blog.domain.repository import UserRepository
from blog.domain.value import UserId
from blog.persistence.mappers import row_to_user, user_to_dict
from blog.persistence.repository.base import store_errors
from blog.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        with store_errors("user_repository.find_by_id"):
            stmt = select(users_table).where(users_table.c.id == user_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_user(dict(row)) if row else None

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Find several users with a single query."""
        ids = list(set(user_ids))
        if not ids:
            return {}

        with store_errors("user_repository.find_by_ids"):
            stmt = select(users_table).where(users_table.c.id.in_(ids))
            result = await self.session.execute(stmt)
            users = [row_to_user(dict(row)) for row in result.mappings().all()]
            return {user.id: user for user in users}

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: Email to search for

        Returns:
            User if found, None otherwise
        """
        with store_errors("user_repository.find_by_email"):
            stmt = select(users_table).where(users_table.c.email == email)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_user(dict(row)) if row else None

    async def find_all(self, limit: int = 10, offset: int = 0) -> List[User]:
        """List users, newest first."""
        with store_errors("user_repository.find_all"):
            stmt = (
                select(users_table)
                .order_by(desc(users_table.c.created_at), users_table.c.id)
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def count(self) -> int:
        """Count all users."""
        with store_errors("user_repository.count"):
            stmt = select(func.count()).select_from(users_table)
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        with store_errors("user_repository.save"):
            user_dict = user_to_dict(user)
            stmt = insert(users_table).values(**user_dict)
            stmt = stmt.on_conflict_do_update(
                index_elements=[users_table.c.id],
                set_={k: v for k, v in user_dict.items() if k != "id"},
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return user
