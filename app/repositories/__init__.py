"""Repositorios: acceso a datos por entidad (singletons)."""

from .base_repository import BaseRepository
from .category_repository import category_repository
from .post_repository import post_repository
from .comment_repository import comment_repository

__all__ = [
    "BaseRepository",
    "category_repository",
    "post_repository",
    "comment_repository",
]
