from typing import Any, Dict, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.blog.category import Category
from app.repositories.base_repository import BaseRepository
from app.services.utils.pagination_service import PageRequest


class CategoryRepository(BaseRepository[Category]):
    sortable_fields = ("id", "name", "description", "created_at", "updated_at")

    async def exists_by_name(self, db: AsyncSession, name: str) -> bool:
        # Coincidencia exacta, sensible a mayúsculas
        stmt = select(Category.id).where(Category.name == name).limit(1)
        return (await db.execute(stmt)).first() is not None

    async def find_by_name(self, db: AsyncSession, name: str) -> Optional[Category]:
        stmt = select(Category).where(Category.name == name).limit(1)
        return (await db.execute(stmt)).scalars().first()

    async def find_by_name_containing(
        self, db: AsyncSession, term: str, page_request: PageRequest
    ) -> Dict[str, Any]:
        query = select(Category).where(func.lower(Category.name).contains(term.lower(), autoescape=True))
        return await self.paginate(db, query, page_request)


category_repository = CategoryRepository(Category)
