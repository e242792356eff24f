"""Error Handlers — global exception handlers for the enrollment API.

Invariants:
    - EnrollmentError → its http_status with {"error": message}
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Two layers: domain (EnrollmentError) and catch-all. The enroll route reads its
      own body, so no typed parameter can raise RequestValidationError
    - One flat error shape for every failure: the form client reads only "error"
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from enrollment.core.errors import EnrollmentError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_enrollment_error_handler(app)
    _register_generic_error_handler(app)


def _register_enrollment_error_handler(app: FastAPI) -> None:

    @app.exception_handler(EnrollmentError)
    async def enrollment_error_handler(request: Request, exc: EnrollmentError):
        log = (
            logger.error if exc.severity == ErrorSeverity.CRITICAL
            else logger.warning
        )
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "status_code": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all; never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "An unexpected error occurred"},
        )
