from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.apis.deps import get_db, PageParams, validate_request
from app.schemas.blog.post_schema import (
    PostRequest, PostResponse, PostListResponse, PostCollectionResponse
)
from app.services.blog import post_service
from app.services.validation.blog_validator import validate_post_request

router = APIRouter()


def _list_response(message: str, result: dict) -> PostListResponse:
    return PostListResponse(
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
# List Posts
# -----------------------------
@router.get("/", response_model=PostListResponse)
async def get_all_posts_route(
    params: PageParams = Depends(),
    db: AsyncSession = Depends(get_db)
):
    """Obtiene los posts paginados (por defecto los más recientes primero)"""
    result = await post_service.list_posts(db, **params.as_kwargs("created_at", "desc"))
    return _list_response("Posts retrieved successfully", result)


# -----------------------------
# Search Posts
# -----------------------------
@router.get("/search", response_model=PostListResponse)
async def search_posts_route(
    search_term: str = Query(..., alias="searchTerm"),
    params: PageParams = Depends(),
    db: AsyncSession = Depends(get_db)
):
    """Busca en título o contenido (sin distinguir mayúsculas)"""
    result = await post_service.search_posts(db, search_term, **params.as_kwargs("created_at", "desc"))
    return _list_response("Posts found", result)


@router.get("/search/author", response_model=PostListResponse)
async def search_posts_by_author_route(
    search_term: str = Query(..., alias="searchTerm"),
    params: PageParams = Depends(),
    db: AsyncSession = Depends(get_db)
):
    result = await post_service.search_posts_by_author(db, search_term, **params.as_kwargs("created_at", "desc"))
    return _list_response("Posts found", result)


# -----------------------------
# Posts by Category
# -----------------------------
@router.get("/category/{category_id}", response_model=PostCollectionResponse)
async def get_posts_by_category_route(category_id: int, db: AsyncSession = Depends(get_db)):
    posts = await post_service.list_posts_by_category(db, category_id)
    return PostCollectionResponse(success=True, message="Posts retrieved successfully", data=posts)


@router.get("/category/{category_id}/latest", response_model=PostCollectionResponse)
async def get_latest_posts_by_category_route(category_id: int, db: AsyncSession = Depends(get_db)):
    posts = await post_service.list_latest_posts_by_category(db, category_id)
    return PostCollectionResponse(success=True, message="Latest posts retrieved successfully", data=posts)


# -----------------------------
# Get Post
# -----------------------------
@router.get("/{post_id}", response_model=PostResponse)
async def get_post_route(post_id: int, db: AsyncSession = Depends(get_db)):
    post = await post_service.get_post(db, post_id)
    return PostResponse(success=True, message="Post retrieved successfully", data=post)


# -----------------------------
# Create Post
# -----------------------------
@router.post("/", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post_route(post_data: PostRequest, db: AsyncSession = Depends(get_db)):
    validate_request(validate_post_request, post_data)
    post = await post_service.create_post(db, post_data)
    return PostResponse(success=True, message="Post created successfully", data=post)


# -----------------------------
# Update Post
# -----------------------------
@router.put("/{post_id}", response_model=PostResponse)
async def update_post_route(
    post_id: int,
    post_data: PostRequest,
    db: AsyncSession = Depends(get_db)
):
    validate_request(validate_post_request, post_data)
    post = await post_service.update_post(db, post_id, post_data)
    return PostResponse(success=True, message="Post updated successfully", data=post)


# -----------------------------
# Delete Post
# -----------------------------
@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post_route(post_id: int, db: AsyncSession = Depends(get_db)):
    await post_service.delete_post(db, post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
