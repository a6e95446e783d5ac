"""
Validadores explícitos por forma de entrada.
Cada función devuelve un diccionario campo -> mensaje (vacío si la entrada es válida).
La capa de API los invoca antes del núcleo; el núcleo vuelve a comprobar los campos
obligatorios con `ensure_not_blank`.
"""

from typing import Any, Dict, Optional

from app.services.validation.exception import ValidationException

CATEGORY_NAME_MAX_LENGTH = 100
CATEGORY_DESCRIPTION_MAX_LENGTH = 500
POST_TITLE_MAX_LENGTH = 200
AUTHOR_MAX_LENGTH = 100


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def _check_required(errors: Dict[str, str], field: str, value: Optional[str], message: str,
                    max_length: Optional[int] = None) -> None:
    if _is_blank(value):
        errors[field] = message
    elif max_length is not None and len(value) > max_length:
        errors[field] = f"{field.capitalize()} must be at most {max_length} characters"


def validate_category_request(data: Any) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    _check_required(errors, "name", data.name, "Category name is required",
                    max_length=CATEGORY_NAME_MAX_LENGTH)

    if data.description is not None and len(data.description) > CATEGORY_DESCRIPTION_MAX_LENGTH:
        errors["description"] = f"Description must be at most {CATEGORY_DESCRIPTION_MAX_LENGTH} characters"
    return errors


def validate_post_request(data: Any) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    _check_required(errors, "title", data.title, "Title is required", max_length=POST_TITLE_MAX_LENGTH)
    _check_required(errors, "content", data.content, "Content is required")
    _check_required(errors, "author", data.author, "Author is required", max_length=AUTHOR_MAX_LENGTH)

    if data.category_id is None:
        errors["category_id"] = "Category ID is required"
    return errors


def validate_comment_request(data: Any) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    _check_required(errors, "content", data.content, "Comment content is required")
    _check_required(errors, "author", data.author, "Author name is required", max_length=AUTHOR_MAX_LENGTH)
    return errors


def raise_if_invalid(errors: Dict[str, str]) -> None:
    if errors:
        raise ValidationException("Validation Failed", errors=errors)


def ensure_not_blank(**fields: Optional[str]) -> None:
    """Comprobación defensiva del núcleo: ningún campo obligatorio puede llegar vacío."""
    errors = {
        field: f"{field.capitalize()} must not be blank"
        for field, value in fields.items()
        if _is_blank(value)
    }
    raise_if_invalid(errors)
