import pytest

from app.schemas.blog.comment_schema import CommentRequest
from app.services.blog import comment_service
from app.services.validation.exception import (
    ResourceNotFoundException,
    ValidationException,
)


@pytest.mark.asyncio
async def test_add_comment_starts_pending(db, tech_post):
    comment = await comment_service.add_comment(db, tech_post.id, CommentRequest(content="nice", author="X"))

    assert comment.id is not None
    assert comment.post_id == tech_post.id
    assert comment.approved is False
    assert comment.created_at == comment.updated_at


@pytest.mark.asyncio
async def test_add_comment_unknown_post(db):
    with pytest.raises(ResourceNotFoundException) as exc:
        await comment_service.add_comment(db, 77, CommentRequest(content="hola", author="X"))

    assert exc.value.message == "Post not found with id: 77"


@pytest.mark.asyncio
async def test_add_comment_blank_content(db, tech_post):
    with pytest.raises(ValidationException):
        await comment_service.add_comment(db, tech_post.id, CommentRequest(content="", author="X"))


@pytest.mark.asyncio
async def test_approve_and_reject(db, pending_comment):
    approved = await comment_service.approve_comment(db, pending_comment.id)
    assert approved.approved is True
    assert approved.updated_at >= pending_comment.updated_at

    # idempotente
    again = await comment_service.approve_comment(db, pending_comment.id)
    assert again.approved is True

    rejected = await comment_service.reject_comment(db, pending_comment.id)
    assert rejected.approved is False


@pytest.mark.asyncio
async def test_approve_unknown_comment(db):
    with pytest.raises(ResourceNotFoundException) as exc:
        await comment_service.approve_comment(db, 31)

    assert exc.value.message == "Comment not found with id: 31"


@pytest.mark.asyncio
async def test_update_comment_keeps_approval(db, pending_comment):
    await comment_service.approve_comment(db, pending_comment.id)

    updated = await comment_service.update_comment(
        db, pending_comment.id, CommentRequest(content="editado", author="Y")
    )

    assert updated.content == "editado"
    assert updated.author == "Y"
    assert updated.approved is True
    assert updated.post_id == pending_comment.post_id


@pytest.mark.asyncio
async def test_delete_comment(db, pending_comment):
    await comment_service.delete_comment(db, pending_comment.id)

    with pytest.raises(ResourceNotFoundException):
        await comment_service.get_comment(db, pending_comment.id)
    with pytest.raises(ResourceNotFoundException):
        await comment_service.delete_comment(db, pending_comment.id)


@pytest.mark.asyncio
async def test_list_and_count_comments(db, tech_post):
    first = await comment_service.add_comment(db, tech_post.id, CommentRequest(content="1", author="A"))
    await comment_service.add_comment(db, tech_post.id, CommentRequest(content="2", author="B"))
    await comment_service.add_comment(db, tech_post.id, CommentRequest(content="3", author="C"))
    await comment_service.approve_comment(db, first.id)

    comments = await comment_service.list_comments_for_post(db, tech_post.id)
    assert [c.content for c in comments] == ["1", "2", "3"]

    approved = await comment_service.list_approved_comments_for_post(db, tech_post.id)
    assert [c.id for c in approved] == [first.id]

    counts = await comment_service.count_comments_for_post(db, tech_post.id)
    assert counts.total == 3
    assert counts.approved == 1
    assert counts.pending == 2


@pytest.mark.asyncio
async def test_list_comments_paged_newest_first(db, tech_post):
    for text in ["1", "2", "3"]:
        await comment_service.add_comment(db, tech_post.id, CommentRequest(content=text, author="A"))

    page = await comment_service.list_comments_for_post_paged(db, tech_post.id, page=0, size=2)

    assert [c.content for c in page["items"]] == ["3", "2"]
    assert page["total"] == 3
    assert page["has_more"] is True


@pytest.mark.asyncio
async def test_comment_queries_unknown_post(db):
    with pytest.raises(ResourceNotFoundException):
        await comment_service.list_comments_for_post(db, 404)
    with pytest.raises(ResourceNotFoundException):
        await comment_service.list_approved_comments_for_post(db, 404)
    with pytest.raises(ResourceNotFoundException):
        await comment_service.count_comments_for_post(db, 404)
    with pytest.raises(ResourceNotFoundException):
        await comment_service.list_comments_for_post_paged(db, 404)


@pytest.mark.asyncio
async def test_empty_post_has_zero_counts(db, tech_post):
    counts = await comment_service.count_comments_for_post(db, tech_post.id)

    assert counts.total == 0
    assert counts.pending == 0
    assert await comment_service.list_approved_comments_for_post(db, tech_post.id) == []
