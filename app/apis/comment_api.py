from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.apis.deps import get_db, PageParams, validate_request
from app.schemas.blog.comment_schema import (
    CommentRequest, CommentResponse, CommentListResponse,
    CommentCollectionResponse, CommentCountResponse
)
from app.services.blog import comment_service
from app.services.validation.blog_validator import validate_comment_request
from app.services.validation.exception import comment_not_found_exception

router = APIRouter()


async def _ensure_comment_in_post(db: AsyncSession, post_id: int, comment_id: int) -> None:
    """Las rutas anidadas solo operan sobre comentarios del post indicado."""
    comment = await comment_service.get_comment(db, comment_id)
    if comment.post_id != post_id:
        raise comment_not_found_exception(comment_id)


# -----------------------------
# List Comments
# -----------------------------
@router.get("/", response_model=CommentListResponse)
async def get_comments_by_post_route(
    post_id: int,
    params: PageParams = Depends(),
    db: AsyncSession = Depends(get_db)
):
    """Comentarios del post paginados (por defecto los más recientes primero)"""
    result = await comment_service.list_comments_for_post_paged(
        db, post_id, **params.as_kwargs("created_at", "desc")
    )
    return CommentListResponse(
        success=True,
        message="Comments retrieved successfully",
        data=result["items"],
        total=result["total"],
        page=result["page"],
        size=result["size"],
        total_pages=result["total_pages"],
        has_more=result["has_more"]
    )


@router.get("/all", response_model=CommentCollectionResponse)
async def get_all_comments_by_post_route(post_id: int, db: AsyncSession = Depends(get_db)):
    comments = await comment_service.list_comments_for_post(db, post_id)
    return CommentCollectionResponse(success=True, message="Comments retrieved successfully", data=comments)


@router.get("/approved", response_model=CommentCollectionResponse)
async def get_approved_comments_route(post_id: int, db: AsyncSession = Depends(get_db)):
    comments = await comment_service.list_approved_comments_for_post(db, post_id)
    return CommentCollectionResponse(
        success=True, message="Approved comments retrieved successfully", data=comments
    )


@router.get("/count", response_model=CommentCountResponse)
async def count_comments_route(post_id: int, db: AsyncSession = Depends(get_db)):
    counts = await comment_service.count_comments_for_post(db, post_id)
    return CommentCountResponse(success=True, message="Comment count retrieved successfully", data=counts)


@router.get("/{comment_id}", response_model=CommentResponse)
async def get_comment_route(post_id: int, comment_id: int, db: AsyncSession = Depends(get_db)):
    await _ensure_comment_in_post(db, post_id, comment_id)
    comment = await comment_service.get_comment(db, comment_id)
    return CommentResponse(success=True, message="Comment retrieved successfully", data=comment)


# -----------------------------
# Create Comment
# -----------------------------
@router.post("/", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
async def add_comment_route(
    post_id: int,
    comment_data: CommentRequest,
    db: AsyncSession = Depends(get_db)
):
    validate_request(validate_comment_request, comment_data)
    comment = await comment_service.add_comment(db, post_id, comment_data)
    return CommentResponse(success=True, message="Comment added successfully", data=comment)


# -----------------------------
# Update Comment
# -----------------------------
@router.put("/{comment_id}", response_model=CommentResponse)
async def update_comment_route(
    post_id: int,
    comment_id: int,
    comment_data: CommentRequest,
    db: AsyncSession = Depends(get_db)
):
    validate_request(validate_comment_request, comment_data)
    await _ensure_comment_in_post(db, post_id, comment_id)
    comment = await comment_service.update_comment(db, comment_id, comment_data)
    return CommentResponse(success=True, message="Comment updated successfully", data=comment)


# -----------------------------
# Delete Comment
# -----------------------------
@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment_route(post_id: int, comment_id: int, db: AsyncSession = Depends(get_db)):
    await _ensure_comment_in_post(db, post_id, comment_id)
    await comment_service.delete_comment(db, comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# -----------------------------
# Moderation
# -----------------------------
@router.put("/{comment_id}/approve", response_model=CommentResponse)
async def approve_comment_route(post_id: int, comment_id: int, db: AsyncSession = Depends(get_db)):
    await _ensure_comment_in_post(db, post_id, comment_id)
    comment = await comment_service.approve_comment(db, comment_id)
    return CommentResponse(success=True, message="Comment approved successfully", data=comment)


@router.put("/{comment_id}/reject", response_model=CommentResponse)
async def reject_comment_route(post_id: int, comment_id: int, db: AsyncSession = Depends(get_db)):
    await _ensure_comment_in_post(db, post_id, comment_id)
    comment = await comment_service.reject_comment(db, comment_id)
    return CommentResponse(success=True, message="Comment rejected successfully", data=comment)
