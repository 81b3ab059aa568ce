# core/exceptions.py
"""
Domain exceptions raised by the service layer and the FastAPI handlers
that turn them into JSON error responses.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

logger = logging.getLogger(__name__)


class TimeLedgerError(Exception):
    """Base exception for domain errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(TimeLedgerError):
    """Raised when a referenced record does not exist."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str, message: str | None = None):
        super().__init__(message or f"{resource.capitalize()} not found")


class ConflictError(TimeLedgerError):
    """Raised when a unique field is already taken."""

    status_code = status.HTTP_409_CONFLICT


class InvalidStateError(TimeLedgerError):
    """Raised when a record is not in a state that allows the operation."""

    status_code = status.HTTP_400_BAD_REQUEST


class LimitExceededError(TimeLedgerError):
    """Raised when a subscription plan quota has been reached."""

    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str, limit: int | None = None):
        super().__init__(message)
        self.limit = limit


# ==================================================================
#  ✅ FastAPI exception handlers
# ==================================================================
async def domain_error_handler(request: Request, exc: TimeLedgerError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning(f"Integrity error on {request.method} {request.url.path}: {exc.orig}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": "A database constraint was violated."},
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(f"❌ Database error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "A database error occurred. Please try again later."},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TimeLedgerError, domain_error_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
