"""
Configuración de SQLAlchemy para trabajar con la base de datos de forma asincrónica.
SQLite (aiosqlite) por defecto; cualquier URL async soportada por SQLAlchemy vía .env.
"""

from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from app.configs.settings import settings

DATABASE_URL = settings.SQLALCHEMY_DATABASE_URI

connect_args = {}
if DATABASE_URL.startswith("sqlite"):
    # SQLite requiere check_same_thread=False para async
    connect_args = {"check_same_thread": False}

engine = create_async_engine(
    DATABASE_URL,
    connect_args=connect_args,
    echo=settings.SQLALCHEMY_ECHO
)

async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False
)

Base = declarative_base()


def enable_sqlite_foreign_keys(async_engine) -> None:
    """SQLite ignora las FOREIGN KEY salvo que se active el pragma en cada conexión."""
    if async_engine.url.get_backend_name() != "sqlite":
        return

    @event.listens_for(async_engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


enable_sqlite_foreign_keys(engine)
