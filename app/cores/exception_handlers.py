"""
Traducción de los errores del núcleo a respuestas HTTP.
NotFound -> 404, Conflict/Validation -> 400, cualquier otro -> 500.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.schemas.common.response_schema import ErrorResponse
from app.services.validation.exception import (
    BlogException,
    ConflictException,
    ResourceNotFoundException,
    UnexpectedException,
    ValidationException,
)

STATUS_BY_EXCEPTION = {
    ResourceNotFoundException: status.HTTP_404_NOT_FOUND,
    ConflictException: status.HTTP_400_BAD_REQUEST,
    ValidationException: status.HTTP_400_BAD_REQUEST,
    UnexpectedException: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _error_response(status_code: int, message: str, error: str = None, errors: dict = None) -> JSONResponse:
    body = ErrorResponse(status=status_code, message=message, error=error, errors=errors)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


async def blog_exception_handler(request: Request, exc: BlogException) -> JSONResponse:
    status_code = STATUS_BY_EXCEPTION.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code >= 500:
        logging.error(f"{request.method} {request.url.path} -> {exc.message}")
    else:
        logging.warning(f"{exc.title}: {exc.message}")
    return _error_response(status_code, exc.title, error=exc.message, errors=exc.errors)


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = {}
    for error in exc.errors():
        # loc = ("body", "name") / ("query", "page")
        field = ".".join(str(part) for part in error["loc"][1:]) or str(error["loc"][0])
        errors[field] = error["msg"]
    logging.warning(f"Validation error occurred: {errors}")
    return _error_response(status.HTTP_400_BAD_REQUEST, "Validation Failed", errors=errors)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logging.exception("An unexpected error occurred", exc_info=exc)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal Server Error",
        error="An internal error occurred. Please try again later.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BlogException, blog_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
