from typing import List

from pydantic import ConfigDict
from pydantic_settings import BaseSettings

"""
Se carga automáticamente desde el archivo `.env` o las variables de entorno del sistema.
    - Define y carga la configuración principal de la aplicación desde variables de entorno.
    - Incluye parámetros para la base de datos, logging, paginación y datos de ejemplo.
    - Configuracion global
"""
class Settings(BaseSettings):
    SQLALCHEMY_DATABASE_URI: str = "sqlite+aiosqlite:///./blog.db"
    SQLALCHEMY_ECHO: bool = False

    APP_TITLE: str = "Blog Management API"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    SEED_SAMPLE_DATA: bool = True

    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:8080",
    ]

    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    model_config = ConfigDict(env_file=".env", extra="ignore")


settings = Settings()
