from datetime import datetime

import pytest

from app.models.blog import Category, Comment, Post
from app.services.blog.projection_service import to_category_data, to_comment_data, to_post_data

NOW = datetime(2024, 5, 1, 10, 30)


def _category(id=1, name="Tech"):
    return Category(id=id, name=name, description="d", created_at=NOW, updated_at=NOW)


def _post(category_id=1):
    return Post(id=10, title="A", content="B", author="C", category_id=category_id,
                created_at=NOW, updated_at=NOW)


def test_to_category_data():
    data = to_category_data(_category())

    assert data.id == 1
    assert data.name == "Tech"
    assert data.description == "d"
    assert data.created_at == NOW


def test_to_post_data_uses_category_name():
    data = to_post_data(_post(), _category())

    assert data.id == 10
    assert data.category_id == 1
    assert data.category_name == "Tech"
    assert data.updated_at == NOW


def test_to_post_data_rejects_other_category():
    with pytest.raises(ValueError):
        to_post_data(_post(category_id=2), _category(id=1))


def test_to_comment_data():
    comment = Comment(id=5, post_id=10, content="hola", author="X", approved=True,
                      created_at=NOW, updated_at=NOW)

    data = to_comment_data(comment)

    assert data.post_id == 10
    assert data.approved is True
    assert data.content == "hola"
