from typing import Any, Dict, List

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.blog.comment import Comment
from app.repositories.base_repository import BaseRepository
from app.services.utils.pagination_service import PageRequest


class CommentRepository(BaseRepository[Comment]):
    sortable_fields = ("id", "content", "author", "post_id", "approved", "created_at", "updated_at")

    async def find_by_post_id(self, db: AsyncSession, post_id: int) -> List[Comment]:
        """Todos los comentarios del post en orden de inserción."""
        stmt = select(Comment).where(Comment.post_id == post_id).order_by(Comment.id)
        return list((await db.execute(stmt)).scalars().all())

    async def find_by_post_id_paged(
        self, db: AsyncSession, post_id: int, page_request: PageRequest
    ) -> Dict[str, Any]:
        query = select(Comment).where(Comment.post_id == post_id)
        return await self.paginate(db, query, page_request)

    async def find_by_post_id_and_approved(
        self, db: AsyncSession, post_id: int, approved: bool
    ) -> List[Comment]:
        stmt = (
            select(Comment)
            .where(Comment.post_id == post_id, Comment.approved == approved)
            .order_by(Comment.created_at.desc(), Comment.id.desc())
        )
        return list((await db.execute(stmt)).scalars().all())

    async def count_by_post_id(self, db: AsyncSession, post_id: int) -> int:
        stmt = select(func.count(Comment.id)).where(Comment.post_id == post_id)
        return (await db.execute(stmt)).scalar() or 0

    async def count_by_post_id_and_approved(self, db: AsyncSession, post_id: int, approved: bool) -> int:
        stmt = select(func.count(Comment.id)).where(
            Comment.post_id == post_id, Comment.approved == approved
        )
        return (await db.execute(stmt)).scalar() or 0

    async def delete_by_post_id(self, db: AsyncSession, post_id: int) -> int:
        result = await db.execute(delete(Comment).where(Comment.post_id == post_id))
        return result.rowcount


comment_repository = CommentRepository(Comment)
