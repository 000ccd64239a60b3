"""Error Handlers: global exception handlers for the sort service.

Invariants:
    - SortServiceError → structured JSON with error code, message, severity
    - Exception (catch-all) → 500, never leaks internal details
    - Validation failures of /sort never reach these handlers (handled in the pipeline)

Design Decisions:
    - Two-layer handler: domain (SortServiceError), catch-all (Exception)
    - No RequestValidationError layer: no route declares a parsed body or parameters
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from sort_service.core.errors import ErrorSeverity, SortServiceError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_service_error_handler(app)
    _register_generic_error_handler(app)


def _register_service_error_handler(app: FastAPI) -> None:
    """Register sort-service domain/transport error handler."""

    @app.exception_handler(SortServiceError)
    async def service_error_handler(request: Request, exc: SortServiceError):
        """Handle all sort-service errors."""
        exc.context.path = exc.context.path or request.url.path
        logger.error(
            f"SortServiceError: {exc.message}", extra=exc.to_log_extra(),
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
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
