"""Error Handlers — global exception handlers for the fiscal code API.

Invariants:
    - FiscalCodeError → structured JSON with error code, message, severity
    - FiscalCodeError envelope names the failing operation (matched route name)
    - RequestValidationError → field-level error details
    - Exception (catch-all) → never leaks internal details
    - Logged lines carry error codes and paths only, never submitted field values

Design Decisions:
    - Three-layer handler: domain (FiscalCodeError), validation (Pydantic), catch-all (Exception)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from fiscalcode.core.errors import FiscalCodeError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_fiscal_code_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_fiscal_code_error_handler(app: FastAPI) -> None:
    """Register fiscal code domain error handler."""

    @app.exception_handler(FiscalCodeError)
    async def fiscal_code_error_handler(request: Request, exc: FiscalCodeError):
        """Handle all fiscal code domain errors."""
        if exc.context.operation is None:
            exc.context.operation = _operation_name(request)
        logger.warning(
            f"Rejected request: {exc.code}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "operation": exc.context.operation,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {len(exc.errors())} field(s)",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _operation_name(request: Request) -> str | None:
    """Name of the matched route endpoint (e.g. "encode_fiscal_code"), if any."""
    route = request.scope.get("route")
    return getattr(route, "name", None)


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
