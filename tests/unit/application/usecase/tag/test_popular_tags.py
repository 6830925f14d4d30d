"""Unit tests for PopularTagsUseCase."""

from uuid import uuid4

from dishka import AsyncContainer
import pytest

from blog.application.usecase.tag import PopularTagsRequest, PopularTagsUseCase
from blog.domain.repository import PostRepository
from blog.domain.value import UserId
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_popular_tags_counts_published_posts(unit_env: AsyncContainer):
    use_case = await unit_env.get(PopularTagsUseCase)
    post_repo = await unit_env.get(PostRepository)
    author = UserId(uuid4())
    await post_repo.save(make_post(author, tags=["a"]))
    await post_repo.save(make_post(author, tags=["a", "b"]))
    await post_repo.save(make_post(author, tags=["b", "c"], is_published=False))

    response = await use_case.execute(PopularTagsRequest())

    assert [(t.tag, t.count) for t in response.tags] == [("a", 2), ("b", 1)]
