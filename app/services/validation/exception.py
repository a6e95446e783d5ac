import logging
from functools import wraps
from typing import Dict, Optional


class BlogException(Exception):
    """Error de negocio que la capa de transporte convierte en respuesta HTTP."""

    title = "Error"

    def __init__(self, message: str, errors: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors


class ResourceNotFoundException(BlogException):
    title = "Resource Not Found"


class ConflictException(BlogException):
    title = "Invalid Argument"


class ValidationException(BlogException):
    title = "Validation Failed"


class UnexpectedException(BlogException):
    title = "Internal Server Error"


def category_not_found_exception(category_id: int) -> ResourceNotFoundException:
    return ResourceNotFoundException(f"Category not found with id: {category_id}")


def post_not_found_exception(post_id: int) -> ResourceNotFoundException:
    return ResourceNotFoundException(f"Post not found with id: {post_id}")


def comment_not_found_exception(comment_id: int) -> ResourceNotFoundException:
    return ResourceNotFoundException(f"Comment not found with id: {comment_id}")


def category_name_taken_exception(name: str) -> ConflictException:
    return ConflictException(f"Category with name '{name}' already exists")


def category_has_posts_exception() -> ConflictException:
    return ConflictException("Cannot delete category with existing posts. Delete all posts first.")


def handle_db_errors(func):
    """
    Decorador para las operaciones del núcleo.
    - Cada operación es una unidad de trabajo: ante cualquier fallo se hace rollback.
    - Los errores de negocio se propagan tal cual.
    - Cualquier otro error se registra y se propaga como UnexpectedException.
    """
    @wraps(func)
    async def wrapper(db, *args, **kwargs):
        try:
            return await func(db, *args, **kwargs)
        except BlogException:
            await db.rollback()
            raise
        except Exception as e:
            await db.rollback()
            logging.exception(f"Error en {func.__name__}: {str(e)}")
            raise UnexpectedException("An internal error occurred. Please try again later.") from e
    return wrapper
