from datetime import datetime
import logging
from typing import Any, Dict, Iterable, List

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.blog.category import Category
from app.models.blog.post import Post
from app.repositories import category_repository, comment_repository, post_repository
from app.schemas.blog.post_schema import PostData, PostRequest
from app.services.blog.projection_service import to_post_data
from app.services.utils.pagination_service import build_page_request
from app.services.validation.blog_validator import ensure_not_blank
from app.services.validation.exception import (
    handle_db_errors,
    category_not_found_exception,
    post_not_found_exception,
    ValidationException,
)


# -----------------------------
# Helpers
# -----------------------------
async def _get_post_or_404(db: AsyncSession, post_id: int) -> Post:
    post = await post_repository.find_by_id(db, post_id)
    if not post:
        raise post_not_found_exception(post_id)
    return post


async def _get_category_or_404(db: AsyncSession, category_id: int) -> Category:
    category = await category_repository.find_by_id(db, category_id)
    if not category:
        raise category_not_found_exception(category_id)
    return category


async def _ensure_category_exists(db: AsyncSession, category_id: int) -> None:
    if not await category_repository.exists_by_id(db, category_id):
        raise category_not_found_exception(category_id)


def _validate_post_fields(post_data: PostRequest) -> None:
    ensure_not_blank(title=post_data.title, content=post_data.content, author=post_data.author)
    if post_data.category_id is None:
        raise ValidationException("Validation Failed", errors={"category_id": "Category ID is required"})


async def _project_posts(db: AsyncSession, posts: Iterable[Post]) -> List[PostData]:
    """Resuelve cada categoría una sola vez por lote y proyecta los posts."""
    categories: Dict[int, Category] = {}
    projected = []
    for post in posts:
        if post.category_id not in categories:
            categories[post.category_id] = await _get_category_or_404(db, post.category_id)
        projected.append(to_post_data(post, categories[post.category_id]))
    return projected


async def _project_page(db: AsyncSession, page: Dict[str, Any]) -> Dict[str, Any]:
    result = dict(page)
    result["items"] = await _project_posts(db, page["items"])
    return result


# -----------------------------
# Queries
# -----------------------------
@handle_db_errors
async def list_posts(
    db: AsyncSession,
    page: int = 0,
    size: int = 10,
    sort_by: str = "created_at",
    sort_dir: str = "desc",
) -> Dict[str, Any]:
    page_request = build_page_request(page, size, sort_by, sort_dir)
    logging.info(f"Fetching all posts with pagination: {page_request}")
    result = await post_repository.find_all(db, page_request)
    return await _project_page(db, result)


@handle_db_errors
async def get_post(db: AsyncSession, post_id: int) -> PostData:
    logging.info(f"Fetching post with id: {post_id}")
    post = await _get_post_or_404(db, post_id)
    category = await _get_category_or_404(db, post.category_id)
    return to_post_data(post, category)


@handle_db_errors
async def list_posts_by_category(db: AsyncSession, category_id: int) -> List[PostData]:
    logging.info(f"Fetching posts for category: {category_id}")
    category = await _get_category_or_404(db, category_id)
    posts = await post_repository.find_by_category_id(db, category_id)
    return [to_post_data(post, category) for post in posts]


@handle_db_errors
async def list_latest_posts_by_category(db: AsyncSession, category_id: int) -> List[PostData]:
    logging.info(f"Fetching latest posts for category: {category_id}")
    category = await _get_category_or_404(db, category_id)
    posts = await post_repository.find_latest_by_category_id(db, category_id)
    return [to_post_data(post, category) for post in posts]


@handle_db_errors
async def search_posts(
    db: AsyncSession,
    search_term: str,
    page: int = 0,
    size: int = 10,
    sort_by: str = "created_at",
    sort_dir: str = "desc",
) -> Dict[str, Any]:
    logging.info(f"Searching posts with term: {search_term}")
    page_request = build_page_request(page, size, sort_by, sort_dir)
    result = await post_repository.find_by_title_or_content_containing(db, search_term, page_request)
    return await _project_page(db, result)


@handle_db_errors
async def search_posts_by_author(
    db: AsyncSession,
    search_term: str,
    page: int = 0,
    size: int = 10,
    sort_by: str = "created_at",
    sort_dir: str = "desc",
) -> Dict[str, Any]:
    logging.info(f"Searching posts by author: {search_term}")
    page_request = build_page_request(page, size, sort_by, sort_dir)
    result = await post_repository.find_by_author_containing(db, search_term, page_request)
    return await _project_page(db, result)


# -----------------------------
# Create Post
# -----------------------------
@handle_db_errors
async def create_post(db: AsyncSession, post_data: PostRequest) -> PostData:
    logging.info(f"Creating new post with title: {post_data.title}")
    _validate_post_fields(post_data)

    category = await _get_category_or_404(db, post_data.category_id)

    now = datetime.now()
    post = Post(
        title=post_data.title,
        content=post_data.content,
        author=post_data.author,
        category_id=category.id,
        created_at=now,
        updated_at=now,
    )
    post = await post_repository.save(db, post)
    await db.commit()

    logging.info(f"Post created successfully with id: {post.id}")
    return to_post_data(post, category)


# -----------------------------
# Update Post
# -----------------------------
@handle_db_errors
async def update_post(db: AsyncSession, post_id: int, post_data: PostRequest) -> PostData:
    logging.info(f"Updating post with id: {post_id}")
    _validate_post_fields(post_data)

    post = await _get_post_or_404(db, post_id)

    # Reasignación de categoría: se resuelve antes de tocar el post
    if post.category_id != post_data.category_id:
        await _ensure_category_exists(db, post_data.category_id)
        post.category_id = post_data.category_id

    post.title = post_data.title
    post.content = post_data.content
    post.author = post_data.author
    post.updated_at = datetime.now()

    post = await post_repository.save(db, post)
    await db.commit()

    category = await _get_category_or_404(db, post.category_id)
    logging.info(f"Post updated successfully with id: {post.id}")
    return to_post_data(post, category)


# -----------------------------
# Delete Post
# -----------------------------
@handle_db_errors
async def delete_post(db: AsyncSession, post_id: int) -> None:
    logging.info(f"Deleting post with id: {post_id}")
    post = await _get_post_or_404(db, post_id)

    # Los comentarios del post se eliminan en la misma unidad de trabajo
    removed_comments = await comment_repository.delete_by_post_id(db, post_id)
    await post_repository.delete(db, post)
    await db.commit()

    logging.info(f"Post deleted successfully with id: {post_id} ({removed_comments} comments removed)")
