"""Exception handlers rendering every failure as ``{"error", "details"?}``."""

import logging

import logfire
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from askboard.domain.error import (
    AuthenticationError,
    BusinessRuleViolationError,
    DomainError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_DOMAIN_STATUS: dict[type[DomainError], int] = {
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    PermissionDeniedError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    BusinessRuleViolationError: status.HTTP_400_BAD_REQUEST,
}


def error_response(
    status_code: int, message: str, details: list | None = None
) -> JSONResponse:
    """Build the error envelope."""
    body: dict = {"error": message}
    if details is not None:
        body["details"] = details
    return JSONResponse(status_code=status_code, content=body)


def _domain_status(exc: DomainError) -> int:
    for error_type in type(exc).__mro__:
        if error_type in _DOMAIN_STATUS:
            return _DOMAIN_STATUS[error_type]
    return status.HTTP_400_BAD_REQUEST


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    status_code = _domain_status(exc)
    logfire.info(
        "Domain error",
        error_type=type(exc).__name__,
        error=str(exc),
        status_code=status_code,
        path=request.url.path,
    )
    return error_response(status_code, str(exc))


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "Invalid input",
        jsonable_encoder(exc.errors(), exclude={"ctx", "url"}),
    )


async def handle_model_validation(
    request: Request, exc: PydanticValidationError
) -> JSONResponse:
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "Invalid input",
        jsonable_encoder(
            exc.errors(include_url=False, include_context=False, include_input=False)
        ),
    )


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logfire.exception("Unhandled error", path=request.url.path)
    logger.error("Unhandled error on %s: %s", request.url.path, exc)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all error handlers on the app."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(PydanticValidationError, handle_model_validation)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected)
