from typing import Any, Dict, List

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.blog.post import Post
from app.repositories.base_repository import BaseRepository
from app.services.utils.pagination_service import PageRequest


class PostRepository(BaseRepository[Post]):
    sortable_fields = ("id", "title", "content", "author", "category_id", "created_at", "updated_at")

    async def find_by_category_id(self, db: AsyncSession, category_id: int) -> List[Post]:
        stmt = select(Post).where(Post.category_id == category_id).order_by(Post.id)
        return list((await db.execute(stmt)).scalars().all())

    async def find_latest_by_category_id(self, db: AsyncSession, category_id: int) -> List[Post]:
        stmt = (
            select(Post)
            .where(Post.category_id == category_id)
            .order_by(Post.created_at.desc(), Post.id.desc())
        )
        return list((await db.execute(stmt)).scalars().all())

    async def count_by_category_id(self, db: AsyncSession, category_id: int) -> int:
        stmt = select(func.count(Post.id)).where(Post.category_id == category_id)
        return (await db.execute(stmt)).scalar() or 0

    async def find_by_title_or_content_containing(
        self, db: AsyncSession, term: str, page_request: PageRequest
    ) -> Dict[str, Any]:
        needle = term.lower()
        query = select(Post).where(
            or_(
                func.lower(Post.title).contains(needle, autoescape=True),
                func.lower(Post.content).contains(needle, autoescape=True),
            )
        )
        return await self.paginate(db, query, page_request)

    async def find_by_author_containing(
        self, db: AsyncSession, term: str, page_request: PageRequest
    ) -> Dict[str, Any]:
        query = select(Post).where(func.lower(Post.author).contains(term.lower(), autoescape=True))
        return await self.paginate(db, query, page_request)


post_repository = PostRepository(Post)
