import pytest

from app.repositories import category_repository, comment_repository, post_repository
from app.scripts.databases.create_sample_data import create_sample_data
from app.services.blog import post_service


@pytest.mark.asyncio
async def test_create_sample_data(session_factory):
    assert await create_sample_data(session_factory) is True

    async with session_factory() as db:
        assert await category_repository.count(db) == 3
        assert await post_repository.count(db) == 5
        assert await comment_repository.count(db) == 3

        # El post más reciente va primero
        page = await post_service.list_posts(db)
        assert page["items"][0].title == "Microservices Architecture Guide"
        assert page["items"][0].category_name == "Technology"


@pytest.mark.asyncio
async def test_create_sample_data_is_idempotent(session_factory):
    await create_sample_data(session_factory)

    assert await create_sample_data(session_factory) is False

    async with session_factory() as db:
        assert await category_repository.count(db) == 3
        assert await post_repository.count(db) == 5
