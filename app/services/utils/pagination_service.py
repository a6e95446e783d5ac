import math
import re
from typing import Any, Dict, Mapping, Optional, Sequence

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import asc, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from app.services.validation.exception import ValidationException


class PageRequest(BaseModel):
    """Página solicitada: índice base 0, tamaño y orden."""
    page: int = Field(0, ge=0)
    size: int = Field(10, ge=1)
    sort_by: str = "id"
    sort_dir: str = "asc"


def build_page_request(page: int, size: int, sort_by: str, sort_dir: str) -> PageRequest:
    try:
        return PageRequest(page=page, size=size, sort_by=sort_by, sort_dir=sort_dir)
    except PydanticValidationError as e:
        errors = {str(err["loc"][0]): err["msg"] for err in e.errors()}
        raise ValidationException("Invalid pagination parameters", errors=errors) from e


def to_snake_case(name: str) -> str:
    """createdAt -> created_at"""
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


class PaginationService:
    @staticmethod
    def resolve_order_by(model: Any, page_request: PageRequest, allowed: Sequence[str]) -> list:
        """
        Convierte sort_by / sort_dir en cláusulas ORDER BY.
        Solo se aceptan columnas de la lista blanca; se desempata por id en la misma dirección.
        """
        sort_key = to_snake_case(page_request.sort_by)
        direction = page_request.sort_dir.lower()

        errors: Dict[str, str] = {}
        if sort_key not in allowed:
            errors["sort_by"] = f"Unsupported sort key '{page_request.sort_by}'. Allowed: {', '.join(allowed)}"
        if direction not in ("asc", "desc"):
            errors["sort_dir"] = "Sort direction must be 'asc' or 'desc'"
        if errors:
            raise ValidationException("Invalid pagination parameters", errors=errors)

        order = desc if direction == "desc" else asc
        clauses = [order(getattr(model, sort_key))]
        if sort_key != "id":
            clauses.append(order(model.id))
        return clauses

    @staticmethod
    async def get_paginated_data(
        db: AsyncSession,
        query: Select,
        page_request: PageRequest,
        order_by: Optional[list] = None,
    ) -> Dict[str, Any]:
        """
        Función genérica para obtener datos paginados a partir de una consulta

        Args:
            db: Sesión de base de datos
            query: SELECT base (con filtros ya aplicados)
            page_request: índice de página (base 0), tamaño y orden
            order_by: cláusulas ORDER BY ya resueltas

        Returns:
            dict con items, total, page, size, total_pages y has_more
        """
        total_query = select_count(query)
        total_count = (await db.execute(total_query)).scalar() or 0

        offset = page_request.page * page_request.size
        paginated_query = query
        if order_by:
            paginated_query = paginated_query.order_by(*order_by)
        paginated_query = paginated_query.limit(page_request.size).offset(offset)
        result = await db.execute(paginated_query)
        items = result.scalars().all()

        return build_page(items, total_count, page_request)


def select_count(query: Select) -> Select:
    return select(func.count()).select_from(query.order_by(None).subquery())


def build_page(items: Sequence[Any], total: int, page_request: PageRequest) -> Dict[str, Any]:
    total_pages = math.ceil(total / page_request.size) if total else 0
    return {
        "items": list(items),
        "total": total,
        "page": page_request.page,
        "size": page_request.size,
        "total_pages": total_pages,
        "has_more": (page_request.page + 1) * page_request.size < total,
    }


def map_page(page: Mapping[str, Any], mapper) -> Dict[str, Any]:
    """Aplica una proyección a los items conservando los metadatos de la página."""
    mapped = dict(page)
    mapped["items"] = [mapper(item) for item in page["items"]]
    return mapped
