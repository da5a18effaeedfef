"""
Domain exceptions and their HTTP translation.

Services raise these and let them propagate; only the API boundary turns
them into responses via ``setup_exception_handlers``.
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger


class NewsdeskError(Exception):
    """Base class for all domain errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(NewsdeskError):
    """A lookup by id or name yielded no entity."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(
        self,
        entity: str,
        key: object,
        *,
        field: str = "id",
        message: Optional[str] = None,
    ) -> None:
        self.entity = entity
        self.key = key
        self.field = field
        super().__init__(message or f"{entity} with {field} {key!r} not found")


class DataIntegrityError(NotFoundError):
    """A stored row references an entity that no longer exists."""


class ConflictError(NewsdeskError):
    status_code = status.HTTP_409_CONFLICT


class InvalidInputError(NewsdeskError):
    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(NewsdeskError):
    status_code = status.HTTP_401_UNAUTHORIZED


async def _handle_newsdesk_error(request: Request, exc: NewsdeskError) -> JSONResponse:
    if isinstance(exc, DataIntegrityError):
        logger.error(f"Data integrity fault on {request.url.path}: {exc.message}")
    else:
        logger.info(f"{type(exc).__name__} on {request.url.path}: {exc.message}")

    headers = None
    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=headers,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register translation of domain errors into JSON responses."""
    app.add_exception_handler(NewsdeskError, _handle_newsdesk_error)
