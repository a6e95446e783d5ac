"""
Moderación de comentarios.

Estados: pendiente (approved=False) y aprobado (approved=True).
Todo comentario nace pendiente; solo `approve_comment` / `reject_comment` cambian el estado.
Ambas transiciones son idempotentes y siempre refrescan updated_at.
"""

from datetime import datetime
import logging
from typing import Any, Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.blog.comment import Comment
from app.repositories import comment_repository, post_repository
from app.schemas.blog.comment_schema import CommentCountData, CommentData, CommentRequest
from app.services.blog.projection_service import to_comment_data
from app.services.utils.pagination_service import build_page_request, map_page
from app.services.validation.blog_validator import ensure_not_blank
from app.services.validation.exception import (
    handle_db_errors,
    post_not_found_exception,
    comment_not_found_exception,
)


# -----------------------------
# Helpers
# -----------------------------
async def _validate_post_exists(db: AsyncSession, post_id: int) -> None:
    if not await post_repository.exists_by_id(db, post_id):
        raise post_not_found_exception(post_id)


async def _get_comment_or_404(db: AsyncSession, comment_id: int) -> Comment:
    comment = await comment_repository.find_by_id(db, comment_id)
    if not comment:
        raise comment_not_found_exception(comment_id)
    return comment


async def _set_approval(db: AsyncSession, comment_id: int, approved: bool) -> CommentData:
    comment = await _get_comment_or_404(db, comment_id)

    comment.approved = approved
    comment.updated_at = datetime.now()

    comment = await comment_repository.save(db, comment)
    await db.commit()
    return to_comment_data(comment)


# -----------------------------
# Queries
# -----------------------------
@handle_db_errors
async def list_comments_for_post(db: AsyncSession, post_id: int) -> List[CommentData]:
    logging.info(f"Fetching comments for post: {post_id}")
    await _validate_post_exists(db, post_id)
    comments = await comment_repository.find_by_post_id(db, post_id)
    return [to_comment_data(comment) for comment in comments]


@handle_db_errors
async def list_comments_for_post_paged(
    db: AsyncSession,
    post_id: int,
    page: int = 0,
    size: int = 10,
    sort_by: str = "created_at",
    sort_dir: str = "desc",
) -> Dict[str, Any]:
    logging.info(f"Fetching comments for post with pagination: {post_id}")
    await _validate_post_exists(db, post_id)
    page_request = build_page_request(page, size, sort_by, sort_dir)
    result = await comment_repository.find_by_post_id_paged(db, post_id, page_request)
    return map_page(result, to_comment_data)


@handle_db_errors
async def list_approved_comments_for_post(db: AsyncSession, post_id: int) -> List[CommentData]:
    logging.info(f"Fetching approved comments for post: {post_id}")
    await _validate_post_exists(db, post_id)
    comments = await comment_repository.find_by_post_id_and_approved(db, post_id, True)
    return [to_comment_data(comment) for comment in comments]


@handle_db_errors
async def count_comments_for_post(db: AsyncSession, post_id: int) -> CommentCountData:
    await _validate_post_exists(db, post_id)
    total = await comment_repository.count_by_post_id(db, post_id)
    approved = await comment_repository.count_by_post_id_and_approved(db, post_id, True)
    return CommentCountData(post_id=post_id, total=total, approved=approved, pending=total - approved)


@handle_db_errors
async def get_comment(db: AsyncSession, comment_id: int) -> CommentData:
    logging.info(f"Fetching comment with id: {comment_id}")
    comment = await _get_comment_or_404(db, comment_id)
    return to_comment_data(comment)


# -----------------------------
# Create Comment
# -----------------------------
@handle_db_errors
async def add_comment(db: AsyncSession, post_id: int, comment_data: CommentRequest) -> CommentData:
    logging.info(f"Adding comment to post: {post_id}")
    ensure_not_blank(content=comment_data.content, author=comment_data.author)
    await _validate_post_exists(db, post_id)

    now = datetime.now()
    comment = Comment(
        post_id=post_id,
        content=comment_data.content,
        author=comment_data.author,
        approved=False,
        created_at=now,
        updated_at=now,
    )
    comment = await comment_repository.save(db, comment)
    await db.commit()

    logging.info(f"Comment added successfully to post {post_id} with id: {comment.id}")
    return to_comment_data(comment)


# -----------------------------
# Update Comment
# -----------------------------
@handle_db_errors
async def update_comment(db: AsyncSession, comment_id: int, comment_data: CommentRequest) -> CommentData:
    logging.info(f"Updating comment with id: {comment_id}")
    ensure_not_blank(content=comment_data.content, author=comment_data.author)

    comment = await _get_comment_or_404(db, comment_id)
    comment.content = comment_data.content
    comment.author = comment_data.author
    comment.updated_at = datetime.now()

    comment = await comment_repository.save(db, comment)
    await db.commit()

    logging.info(f"Comment updated successfully with id: {comment.id}")
    return to_comment_data(comment)


# -----------------------------
# Delete Comment
# -----------------------------
@handle_db_errors
async def delete_comment(db: AsyncSession, comment_id: int) -> None:
    logging.info(f"Deleting comment with id: {comment_id}")
    if not await comment_repository.delete_by_id(db, comment_id):
        raise comment_not_found_exception(comment_id)

    await db.commit()
    logging.info(f"Comment deleted successfully with id: {comment_id}")


# -----------------------------
# Moderation
# -----------------------------
@handle_db_errors
async def approve_comment(db: AsyncSession, comment_id: int) -> CommentData:
    logging.info(f"Approving comment with id: {comment_id}")
    comment = await _set_approval(db, comment_id, True)
    logging.info(f"Comment approved successfully with id: {comment_id}")
    return comment


@handle_db_errors
async def reject_comment(db: AsyncSession, comment_id: int) -> CommentData:
    logging.info(f"Rejecting comment with id: {comment_id}")
    comment = await _set_approval(db, comment_id, False)
    logging.info(f"Comment rejected successfully with id: {comment_id}")
    return comment
