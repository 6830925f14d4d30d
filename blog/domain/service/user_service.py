"""User domain service."""

from datetime import datetime
from typing import Iterable, Optional
from uuid import uuid4

import logfire

from blog.domain.error import InvalidCredentialsError, NotFoundError, ValidationError
from blog.domain.model.registration import Registration
from blog.domain.model.user import User
from blog.domain.repository import UserRepository
from blog.domain.value import UserId, UserRole
from blog.util.password import hash_password, verify_password

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get a user by ID.

        Args:
            user_id: User ID

        Returns:
            The user

        Raises:
            NotFoundError: If the user doesn't exist
        """
        user = await self.user_repository.find_by_id(user_id)
        if not user:
            logfire.warn("User not found", user_id=str(user_id))
            raise NotFoundError("User", str(user_id))
        return user

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Look a user up by ID, None if there is no such user."""
        return await self.user_repository.find_by_id(user_id)

    async def get_directory(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Resolve many user references at once for populating posts.

        Args:
            user_ids: Referenced user IDs (duplicates allowed)

        Returns:
            Mapping of the IDs that exist to their users
        """
        unique_ids = set(user_ids)
        if not unique_ids:
            return {}
        return await self.user_repository.find_by_ids(unique_ids)

    async def list_users(self, limit: int, offset: int) -> tuple[list[User], int]:
        """List one page of users together with the total user count."""
        total = await self.user_repository.count()
        users = await self.user_repository.find_all(limit=limit, offset=offset)
        return users, total

    async def get_or_create(
        self,
        email: str,
        name: str,
        role: UserRole = UserRole.USER,
        avatar: Optional[str] = None,
    ) -> User:
        """Find a user by email, creating the account if it doesn't exist.

        Args:
            email: Email identifying the account
            name: Display name for a new account
            role: Role for a new account
            avatar: Avatar URL for a new account

        Returns:
            The existing or newly created user
        """
        with logfire.span("user_service.get_or_create", email=email):
            existing = await self.user_repository.find_by_email(email)
            if existing:
                return existing

            user = User(
                id=UserId(uuid4()),
                name=name,
                email=email,
                avatar=avatar,
                role=role,
                created_at=datetime.now(),
            )
            saved = await self.user_repository.save(user)
            logfire.info("User created", user_id=str(saved.id), role=role.value)
            return saved

    async def register(self, registration: Registration) -> User:
        """Create a password-protected account.

        Args:
            registration: Validated sign-up details

        Returns:
            The new user, with the default role

        Raises:
            ValidationError: If the email already belongs to an account
        """
        with logfire.span("user_service.register", email=registration.email):
            if await self.user_repository.find_by_email(registration.email):
                logfire.info("Registration with a taken email")
                raise ValidationError.single("email", "Email is already registered")

            user = User(
                id=UserId(uuid4()),
                name=registration.name,
                email=registration.email,
                role=UserRole.USER,
                password_hash=hash_password(registration.password),
                created_at=datetime.now(),
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def authenticate(self, email: str, password: str) -> User:
        """Check a login and return the account it belongs to.

        Raises:
            InvalidCredentialsError: If no account has the email, the account
                has no password, or the password is wrong
        """
        with logfire.span("user_service.authenticate"):
            user = await self.user_repository.find_by_email(email.strip().lower())
            if (
                user is None
                or user.password_hash is None
                or not verify_password(password, user.password_hash)
            ):
                logfire.info("Login rejected")
                raise InvalidCredentialsError()

            logfire.info("User logged in", user_id=str(user.id))
            return user
