"""Server errors reach clients as a bare 500 without internals."""

import httpx
import pytest

from blog.domain.error import StoreError
from blog.domain.repository import PostRepository
from blog.interface.api.app import create_app
from tests.di import build_test_container

INTERNALS = "connection to 10.0.0.3:5432 refused (user=blog, db=blog_prod)"


def failing(error: Exception):
    async def _fail(*args, **kwargs):
        raise error

    return _fail


class TestStoreFailures:
    @pytest.mark.asyncio
    async def test_failed_listing_hides_store_details(self, api, monkeypatch):
        post_repo = await api.container.get(PostRepository)
        monkeypatch.setattr(post_repo, "count", failing(StoreError(INTERNALS)))
        monkeypatch.setattr(post_repo, "find_all", failing(StoreError(INTERNALS)))

        response = await api.get("/posts")

        assert response.status_code == 500
        assert response.json() == {"detail": "Server error"}
        assert "10.0.0.3" not in response.text

    @pytest.mark.asyncio
    async def test_failed_write_hides_store_details(self, api, monkeypatch):
        alice = await api.login("Alice")
        post_repo = await api.container.get(PostRepository)
        monkeypatch.setattr(post_repo, "save", failing(StoreError(INTERNALS)))

        response = await api.post(
            "/posts", json={"title": "T", "content": "C"}, headers=alice.headers
        )

        assert response.status_code == 500
        assert response.json() == {"detail": "Server error"}
        assert "blog_prod" not in response.text

    @pytest.mark.asyncio
    async def test_failed_popular_tags_hides_store_details(self, api, monkeypatch):
        post_repo = await api.container.get(PostRepository)
        monkeypatch.setattr(
            post_repo, "popular_tags", failing(StoreError(INTERNALS))
        )

        response = await api.get("/posts/tags/popular")

        assert response.status_code == 500
        assert response.json() == {"detail": "Server error"}


@pytest.mark.asyncio
async def test_unexpected_exception_hides_details(monkeypatch):
    container = build_test_container()
    post_repo = await container.get(PostRepository)
    monkeypatch.setattr(post_repo, "count", failing(RuntimeError(INTERNALS)))
    # The error is re-raised to the server after the 500 is sent
    transport = httpx.ASGITransport(
        app=create_app(container), raise_app_exceptions=False
    )

    async with httpx.AsyncClient(
        transport=transport, base_url="http://testserver"
    ) as client:
        response = await client.get("/posts")

    await container.close()

    assert response.status_code == 500
    assert response.json() == {"detail": "Server error"}
    assert "10.0.0.3" not in response.text
