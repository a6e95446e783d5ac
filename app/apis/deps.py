from typing import AsyncGenerator, Optional

from fastapi import Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.configs.settings import settings
from app.cores.db import async_session
from app.services.validation.blog_validator import raise_if_invalid

"""
Este archivo define la función `get_db`, que proporciona una sesión de base de datos asincrónica.
Se usa como dependencia en rutas de FastAPI para interactuar con la base de datos sin preocuparse
por abrir o cerrar la conexión manualmente.
"""
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    session = async_session()
    try:
        yield session
    finally:
        await session.close()


class PageParams:
    """Parámetros de paginación comunes (page base 0)."""

    def __init__(
        self,
        page: int = Query(0, ge=0, description="Índice de página (base 0)"),
        size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
        sort_by: Optional[str] = Query(None, description="Campo de orden, p.ej. name o createdAt"),
        sort_dir: Optional[str] = Query(None, description="asc | desc"),
    ):
        self.page = page
        self.size = size
        self.sort_by = sort_by
        self.sort_dir = sort_dir

    def as_kwargs(self, default_sort_by: str, default_sort_dir: str) -> dict:
        return {
            "page": self.page,
            "size": self.size,
            "sort_by": self.sort_by or default_sort_by,
            "sort_dir": self.sort_dir or default_sort_dir,
        }


def validate_request(validator, data) -> None:
    """Ejecuta el validador de la forma de entrada antes de llamar al núcleo."""
    raise_if_invalid(validator(data))
