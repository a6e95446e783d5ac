"""
Este bloque define la configuración de inicio (lifespan) y creación de la aplicación FastAPI.
Incluye tareas que deben ejecutarse al arrancar la aplicación, como la creación de tablas y datos iniciales.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.configs.settings import settings
from app.cores.db import Base, engine
from app.cores.exception_handlers import register_exception_handlers
from app.cores.logging_config import configure_logging

from app.models.blog import Category, Post, Comment  # registra las tablas en Base.metadata

from app.scripts.databases.create_sample_data import create_sample_data

from app.apis.category_api import router as category_router
from app.apis.post_api import router as post_router
from app.apis.comment_api import router as comment_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Función que se ejecuta al iniciar la aplicación.
    - Crea todas las tablas en la base de datos si no existen.
    - Inserta los datos de ejemplo si la base está vacía (SEED_SAMPLE_DATA).
    - Al finalizar, continúa con la ejecución normal de la app (con `yield`).
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if settings.SEED_SAMPLE_DATA:
        await create_sample_data()

    logging.info(f"{settings.APP_TITLE} {settings.APP_VERSION} started")
    yield
    await engine.dispose()

"""
    Función que construye y retorna la instancia principal de la aplicación FastAPI.
    - Configura logging y CORS.
    - Aplica la función `lifespan` para la inicialización.
    - Registra los manejadores de errores y las rutas de categorías, posts y comentarios.
"""


def create_app() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_TITLE,
        version=settings.APP_VERSION,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(category_router, prefix="/api/categories", tags=["Categories"])
    app.include_router(post_router, prefix="/api/posts", tags=["Posts"])
    app.include_router(comment_router, prefix="/api/posts/{post_id}/comments", tags=["Comments"])

    return app
