"""Error Handlers — map exceptions to the storefront JSON error envelope.

Invariants:
    - Every error body is {"error": {code, message, category, severity, ...}}
    - Request validation failures are 400 VALIDATION_ERROR with per-field details
    - Unhandled exceptions answer 500 INTERNAL_ERROR without internal details

Design Decisions:
    - Plain module-level handlers registered with add_exception_handler, so
      tests can call them directly without building an app
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import ErrorSeverity, StorefrontError

logger = logging.getLogger(__name__)


def _envelope(
    code: str, message: str, category: str, severity: ErrorSeverity, **extra,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category,
            "severity": severity.value,
            **extra,
        },
    }


def validation_details(exc: RequestValidationError) -> list[dict]:
    """One entry per failing field; `field` is the dotted location (body.quantity)."""
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]


async def handle_storefront_error(
    request: Request, exc: StorefrontError,
) -> JSONResponse:
    level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
    logger.log(
        level,
        f"{exc.code} on {request.url.path}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "product_id": exc.context.product_id,
            "locale": exc.context.locale,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = validation_details(exc)
    logger.warning(
        f"Rejected request on {request.url.path}",
        extra={"path": request.url.path, "error_code": "VALIDATION_ERROR"},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Invalid request data", "validation",
            ErrorSeverity.ERROR, details=details,
        ),
    )


async def handle_unexpected_error(
    request: Request, exc: Exception,
) -> JSONResponse:
    logger.exception(f"Unhandled {type(exc).__name__} on {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred", "internal",
            ErrorSeverity.CRITICAL,
        ),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StorefrontError, handle_storefront_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
