"""In-memory user repository for testing."""

from typing import Iterable, Optional

from blog.domain.model.user import User
from blog.domain.repository.user import UserRepository
from blog.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Find several users by ID."""
        return {uid: self._users[uid] for uid in set(user_ids) if uid in self._users}

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_all(self, limit: int = 10, offset: int = 0) -> list[User]:
        """List users, newest first."""
        users = sorted(self._users.values(), key=lambda u: u.created_at, reverse=True)
        return users[offset : offset + limit]

    async def count(self) -> int:
        """Count all users."""
        return len(self._users)

    async def save(self, user: User) -> User:
        """Save a user."""
        self._users[user.id] = user
        return user
