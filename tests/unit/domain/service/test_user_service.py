"""Unit tests for UserService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from blog.domain.error import InvalidCredentialsError, NotFoundError, ValidationError
from blog.domain.model import Registration
from blog.domain.repository import UserRepository
from blog.domain.service import UserService
from blog.domain.value import UserId, UserRole
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUserService:
    @pytest.mark.asyncio
    async def test_get_by_id_raises_for_unknown_user(self, unit_env):
        service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await service.get_by_id(UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_directory_skips_unknown_ids(self, unit_env):
        service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user("Alice"))
        ghost = UserId(uuid4())

        directory = await service.get_directory([alice.id, alice.id, ghost])

        assert directory == {alice.id: alice}

    @pytest.mark.asyncio
    async def test_directory_of_nothing_is_empty(self, unit_env):
        service = await unit_env.get(UserService)
        assert await service.get_directory([]) == {}

    @pytest.mark.asyncio
    async def test_get_or_create_is_idempotent_per_email(self, unit_env):
        service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)

        first = await service.get_or_create("root@example.com", "Root", UserRole.ADMIN)
        second = await service.get_or_create("root@example.com", "Someone else")

        assert first == second
        assert second.role == UserRole.ADMIN
        assert await user_repo.count() == 1

    @pytest.mark.asyncio
    async def test_list_users_newest_first(self, unit_env):
        service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        start = datetime(2024, 1, 1)
        older = await user_repo.save(make_user("Older", created_at=start))
        newer = await user_repo.save(
            make_user("Newer", created_at=start + timedelta(days=1))
        )

        users, total = await service.list_users(limit=10, offset=0)

        assert total == 2
        assert [u.id for u in users] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_find_by_id_returns_none_for_unknown_user(self, unit_env):
        service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        alice = await user_repo.save(make_user("Alice"))

        assert await service.find_by_id(alice.id) == alice
        assert await service.find_by_id(UserId(uuid4())) is None


class TestRegistration:
    @pytest.mark.asyncio
    async def test_register_stores_a_hash_not_the_password(self, unit_env):
        service = await unit_env.get(UserService)

        user = await service.register(
            Registration(name="Ada", email=" Ada@Example.com ", password="s3cret!")
        )

        assert user.email == "ada@example.com"
        assert user.role == UserRole.USER
        assert user.password_hash is not None
        assert "s3cret!" not in user.password_hash

    @pytest.mark.asyncio
    async def test_taken_email_is_a_validation_error(self, unit_env):
        service = await unit_env.get(UserService)
        registration = Registration(
            name="Ada", email="ada@example.com", password="s3cret!"
        )
        await service.register(registration)

        with pytest.raises(ValidationError) as exc_info:
            await service.register(registration)

        assert exc_info.value.errors[0].field == "email"

    @pytest.mark.asyncio
    async def test_authenticate_accepts_the_registered_password(self, unit_env):
        service = await unit_env.get(UserService)
        user = await service.register(
            Registration(name="Ada", email="ada@example.com", password="s3cret!")
        )

        assert await service.authenticate("ADA@example.com", "s3cret!") == user

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "email,password",
        [("ada@example.com", "wrong-password"), ("nobody@example.com", "s3cret!")],
    )
    async def test_bad_credentials_are_rejected(self, unit_env, email, password):
        service = await unit_env.get(UserService)
        await service.register(
            Registration(name="Ada", email="ada@example.com", password="s3cret!")
        )

        with pytest.raises(InvalidCredentialsError):
            await service.authenticate(email, password)

    @pytest.mark.asyncio
    async def test_account_without_password_cannot_log_in(self, unit_env):
        service = await unit_env.get(UserService)
        await service.get_or_create("root@example.com", "Root", UserRole.ADMIN)

        with pytest.raises(InvalidCredentialsError):
            await service.authenticate("root@example.com", "")
