import pytest

from app.schemas.blog.category_schema import CategoryRequest
from app.schemas.blog.comment_schema import CommentRequest
from app.schemas.blog.post_schema import PostRequest
from app.services.validation.blog_validator import (
    ensure_not_blank,
    raise_if_invalid,
    validate_category_request,
    validate_comment_request,
    validate_post_request,
)
from app.services.validation.exception import ValidationException


def test_valid_category_request():
    assert validate_category_request(CategoryRequest(name="Tech", description="d")) == {}


def test_category_blank_name():
    errors = validate_category_request(CategoryRequest(name=" "))
    assert errors == {"name": "Category name is required"}


def test_category_description_too_long():
    data = CategoryRequest(name="Tech", description="x" * 501)
    assert validate_category_request(data) == {"description": "Description must be at most 500 characters"}


def test_post_request_collects_all_errors():
    errors = validate_post_request(PostRequest(title="", content=" ", author=""))

    assert errors == {
        "title": "Title is required",
        "content": "Content is required",
        "author": "Author is required",
        "category_id": "Category ID is required",
    }


def test_post_title_too_long():
    data = PostRequest(title="t" * 201, content="c", author="a", category_id=1)
    assert validate_post_request(data) == {"title": "Title must be at most 200 characters"}


def test_comment_request():
    assert validate_comment_request(CommentRequest(content="hola", author="X")) == {}
    assert validate_comment_request(CommentRequest(content="", author="")) == {
        "content": "Comment content is required",
        "author": "Author name is required",
    }


def test_raise_if_invalid():
    raise_if_invalid({})

    with pytest.raises(ValidationException) as exc:
        raise_if_invalid({"name": "Category name is required"})

    assert exc.value.message == "Validation Failed"
    assert exc.value.errors == {"name": "Category name is required"}


def test_ensure_not_blank():
    ensure_not_blank(title="A", author="B")

    with pytest.raises(ValidationException) as exc:
        ensure_not_blank(title="A", author=None)

    assert exc.value.errors == {"author": "Author must not be blank"}
