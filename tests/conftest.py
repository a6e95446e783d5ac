import pytest
from httpx import AsyncClient, ASGITransport

from app.main import app
from app.apis.deps import get_db
from app.schemas.blog.category_schema import CategoryRequest
from app.schemas.blog.comment_schema import CommentRequest
from app.schemas.blog.post_schema import PostRequest
from app.services.blog import category_service, comment_service, post_service
from tests.test_db import (
    create_test_engine,
    create_test_session_factory,
    init_test_db,
    make_override_get_db,
)


@pytest.fixture
async def engine():
    engine_test = create_test_engine()
    await init_test_db(engine_test)
    yield engine_test
    await engine_test.dispose()


@pytest.fixture
def session_factory(engine):
    return create_test_session_factory(engine)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    # Sobrescribe get_db con la base de datos de prueba
    app.dependency_overrides[get_db] = make_override_get_db(session_factory)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client
    app.dependency_overrides.clear()


# -----------------------------
# Datos de apoyo
# -----------------------------
@pytest.fixture
async def tech_category(db):
    return await category_service.create_category(
        db, CategoryRequest(name="Tech", description="Technology posts")
    )


@pytest.fixture
async def tech_post(db, tech_category):
    return await post_service.create_post(
        db,
        PostRequest(title="A", content="B", author="C", category_id=tech_category.id),
    )


@pytest.fixture
async def pending_comment(db, tech_post):
    return await comment_service.add_comment(
        db, tech_post.id, CommentRequest(content="nice", author="X")
    )
