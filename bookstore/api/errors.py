# bookstore/api/errors.py
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookstore.domain.exceptions import BookstoreError
from bookstore.utils.logging import get_logger

logger = get_logger(__name__)


def error_body(status_code: int, code: str, message: str, details=None) -> dict:
    body = {
        "error": True,
        "code": code,
        "message": message,
        "status_code": status_code,
    }
    if details is not None:
        body["details"] = details
    return body


async def bookstore_error_handler(request: Request, exc: BookstoreError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, exc.code, exc.message),
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # nieznana sciezka, zla metoda itp.
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, HTTPStatus(exc.status_code).name, str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(
            status.HTTP_400_BAD_REQUEST,
            "VALIDATION_ERROR",
            "Request validation failed",
            details=jsonable_encoder(exc.errors()),
        ),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "INTERNAL_ERROR",
            "An unexpected error occurred",
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BookstoreError, bookstore_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
