"""Fixtures for end-to-end tests through the HTTP API."""

from dataclasses import dataclass

import httpx
import pytest
import pytest_asyncio

from blog.domain.model import User
from blog.domain.repository import UserRepository
from blog.domain.service import JWTService
from blog.domain.value import UserRole
from blog.interface.api.app import create_app
from tests.conftest import make_user
from tests.di import build_test_container


@dataclass
class ApiUser:
    """A seeded user and the headers that authenticate as them."""

    user: User
    headers: dict[str, str]

    @property
    def id(self) -> str:
        return str(self.user.id)


@pytest.fixture
def api_providers() -> list:
    """Providers replacing parts of the container. Override in a test module."""
    return []


@pytest_asyncio.fixture
async def api(api_providers):
    """HTTP client for an app backed by in-memory persistence.

    Yields the client together with a ``login`` helper that seeds a user
    and returns their auth headers, and the ``app`` and ``container`` serving it.
    """
    container = build_test_container(overrides=api_providers)
    app_instance = create_app(container)

    async def login(name: str, role: UserRole = UserRole.USER) -> ApiUser:
        user_repo = await container.get(UserRepository)
        user = await user_repo.save(make_user(name, role=role))
        async with container() as request_container:
            jwt_service = await request_container.get(JWTService)
            token = jwt_service.create_token(str(user.id), user.role)
        return ApiUser(user=user, headers={"Authorization": f"Bearer {token}"})

    transport = httpx.ASGITransport(app=app_instance)
    async with httpx.AsyncClient(
        transport=transport, base_url="http://testserver"
    ) as client:
        client.login = login
        client.container = container
        client.app = app_instance
        yield client

    await container.close()
