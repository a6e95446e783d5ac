"""Repositorio genérico asíncrono para modelos SQLAlchemy."""

from __future__ import annotations

from typing import Any, Dict, Generic, Optional, Sequence, Type, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.cores.db import Base
from app.services.utils.pagination_service import PageRequest, PaginationService


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """CRUD reutilizable sobre la sesión de la operación en curso.

    Nunca hace commit: la unidad de trabajo la cierra el servicio que llama.
    Todos los métodos devuelven instancias del modelo, no esquemas.
    """

    sortable_fields: Sequence[str] = ("id",)

    def __init__(self, model: Type[ModelType]):
        self.model = model

    # ----- Read -----
    async def find_by_id(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        return await db.get(self.model, id)

    async def exists_by_id(self, db: AsyncSession, id: Any) -> bool:
        stmt = select(self.model.id).where(self.model.id == id).limit(1)
        return (await db.execute(stmt)).first() is not None

    async def count(self, db: AsyncSession) -> int:
        stmt = select(func.count()).select_from(self.model)
        return (await db.execute(stmt)).scalar() or 0

    async def find_all(self, db: AsyncSession, page_request: PageRequest) -> Dict[str, Any]:
        """Página de registros ordenada según page_request."""
        return await self.paginate(db, select(self.model), page_request)

    async def paginate(self, db: AsyncSession, query, page_request: PageRequest) -> Dict[str, Any]:
        order_by = PaginationService.resolve_order_by(self.model, page_request, self.sortable_fields)
        return await PaginationService.get_paginated_data(db, query, page_request, order_by=order_by)

    # ----- Write -----
    async def save(self, db: AsyncSession, db_obj: ModelType) -> ModelType:
        """Inserta o actualiza; hace flush para obtener el id y refresca el objeto."""
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def delete(self, db: AsyncSession, db_obj: ModelType) -> None:
        await db.delete(db_obj)
        await db.flush()

    async def delete_by_id(self, db: AsyncSession, id: Any) -> bool:
        """Elimina por clave primaria. Devuelve False si no existía."""
        result = await db.execute(delete(self.model).where(self.model.id == id))
        return result.rowcount > 0
