from datetime import datetime
import logging
from typing import Dict, Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.blog.category import Category
from app.repositories import category_repository, post_repository
from app.schemas.blog.category_schema import CategoryData, CategoryRequest
from app.services.blog.projection_service import to_category_data
from app.services.utils.pagination_service import build_page_request, map_page
from app.services.validation.blog_validator import ensure_not_blank
from app.services.validation.exception import (
    handle_db_errors,
    category_not_found_exception,
    category_name_taken_exception,
    category_has_posts_exception,
)


# -----------------------------
# Helpers
# -----------------------------
async def _get_category_or_404(db: AsyncSession, category_id: int) -> Category:
    category = await category_repository.find_by_id(db, category_id)
    if not category:
        raise category_not_found_exception(category_id)
    return category


def _is_name_conflict(error: IntegrityError) -> bool:
    # SQLite: "UNIQUE constraint failed: categories.name"; otros motores nombran el índice
    detail = str(error.orig)
    return "categories.name" in detail or "ix_categories_name" in detail


async def _save_unique_name(db: AsyncSession, category: Category, name: str) -> Category:
    """Guarda y confirma; la violación del índice único de nombre se traduce en un conflicto."""
    try:
        category = await category_repository.save(db, category)
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        if _is_name_conflict(e):
            raise category_name_taken_exception(name)
        raise
    return category


# -----------------------------
# Queries
# -----------------------------
@handle_db_errors
async def list_categories(
    db: AsyncSession,
    page: int = 0,
    size: int = 10,
    sort_by: str = "name",
    sort_dir: str = "asc",
) -> Dict[str, Any]:
    page_request = build_page_request(page, size, sort_by, sort_dir)
    logging.info(f"Fetching all categories with pagination: {page_request}")
    result = await category_repository.find_all(db, page_request)
    return map_page(result, to_category_data)


@handle_db_errors
async def get_category(db: AsyncSession, category_id: int) -> CategoryData:
    logging.info(f"Fetching category with id: {category_id}")
    category = await _get_category_or_404(db, category_id)
    return to_category_data(category)


@handle_db_errors
async def search_categories(
    db: AsyncSession,
    search_term: str,
    page: int = 0,
    size: int = 10,
    sort_by: str = "name",
    sort_dir: str = "asc",
) -> Dict[str, Any]:
    logging.info(f"Searching categories with term: {search_term}")
    page_request = build_page_request(page, size, sort_by, sort_dir)
    result = await category_repository.find_by_name_containing(db, search_term, page_request)
    return map_page(result, to_category_data)


# -----------------------------
# Create Category
# -----------------------------
@handle_db_errors
async def create_category(db: AsyncSession, category_data: CategoryRequest) -> CategoryData:
    logging.info(f"Creating new category: {category_data.name}")
    ensure_not_blank(name=category_data.name)

    if await category_repository.exists_by_name(db, category_data.name):
        raise category_name_taken_exception(category_data.name)

    now = datetime.now()
    category = Category(
        name=category_data.name,
        description=category_data.description,
        created_at=now,
        updated_at=now,
    )
    category = await _save_unique_name(db, category, category_data.name)

    logging.info(f"Category created successfully with id: {category.id}")
    return to_category_data(category)


# -----------------------------
# Update Category
# -----------------------------
@handle_db_errors
async def update_category(db: AsyncSession, category_id: int, category_data: CategoryRequest) -> CategoryData:
    logging.info(f"Updating category with id: {category_id}")
    ensure_not_blank(name=category_data.name)

    category = await _get_category_or_404(db, category_id)

    # El nombre solo choca si pertenece a otra categoría
    if category.name != category_data.name and await category_repository.exists_by_name(db, category_data.name):
        raise category_name_taken_exception(category_data.name)

    category.name = category_data.name
    category.description = category_data.description
    category.updated_at = datetime.now()

    category = await _save_unique_name(db, category, category_data.name)

    logging.info(f"Category updated successfully with id: {category.id}")
    return to_category_data(category)


# -----------------------------
# Delete Category
# -----------------------------
@handle_db_errors
async def delete_category(db: AsyncSession, category_id: int) -> None:
    logging.info(f"Deleting category with id: {category_id}")
    category = await _get_category_or_404(db, category_id)

    if await post_repository.count_by_category_id(db, category_id) > 0:
        raise category_has_posts_exception()

    await category_repository.delete(db, category)
    await db.commit()
    logging.info(f"Category deleted successfully with id: {category_id}")
