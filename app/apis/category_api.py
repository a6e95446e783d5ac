from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.apis.deps import get_db, PageParams, validate_request
from app.schemas.blog.category_schema import (
    CategoryRequest, CategoryResponse, CategoryListResponse
)
from app.services.blog import category_service
from app.services.validation.blog_validator import validate_category_request

router = APIRouter()


def _list_response(message: str, result: dict) -> CategoryListResponse:
    return CategoryListResponse(
        success=True,
        message=message,
        data=result["items"],
        total=result["total"],
        page=result["page"],
        size=result["size"],
        total_pages=result["total_pages"],
        has_more=result["has_more"]
    )


# -----------------------------
# List Categories
# -----------------------------
@router.get("/", response_model=CategoryListResponse)
async def get_all_categories_route(
    params: PageParams = Depends(),
    db: AsyncSession = Depends(get_db)
):
    """Obtiene las categorías paginadas (por defecto ordenadas por nombre asc)"""
    result = await category_service.list_categories(db, **params.as_kwargs("name", "asc"))
    return _list_response("Categories retrieved successfully", result)


# -----------------------------
# Search Categories
# -----------------------------
@router.get("/search", response_model=CategoryListResponse)
async def search_categories_route(
    search_term: str = Query(..., alias="searchTerm"),
    params: PageParams = Depends(),
    db: AsyncSession = Depends(get_db)
):
    """Busca categorías cuyo nombre contenga el término (sin distinguir mayúsculas)"""
    result = await category_service.search_categories(db, search_term, **params.as_kwargs("name", "asc"))
    return _list_response("Categories found", result)


# -----------------------------
# Get Category
# -----------------------------
@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category_route(category_id: int, db: AsyncSession = Depends(get_db)):
    category = await category_service.get_category(db, category_id)
    return CategoryResponse(success=True, message="Category retrieved successfully", data=category)


# -----------------------------
# Create Category
# -----------------------------
@router.post("/", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category_route(
    category_data: CategoryRequest,
    db: AsyncSession = Depends(get_db)
):
    validate_request(validate_category_request, category_data)
    category = await category_service.create_category(db, category_data)
    return CategoryResponse(success=True, message="Category created successfully", data=category)


# -----------------------------
# Update Category
# -----------------------------
@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category_route(
    category_id: int,
    category_data: CategoryRequest,
    db: AsyncSession = Depends(get_db)
):
    validate_request(validate_category_request, category_data)
    category = await category_service.update_category(db, category_id, category_data)
    return CategoryResponse(success=True, message="Category updated successfully", data=category)


# -----------------------------
# Delete Category
# -----------------------------
@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category_route(category_id: int, db: AsyncSession = Depends(get_db)):
    await category_service.delete_category(db, category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
