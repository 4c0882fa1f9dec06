"""Base application errors and the repository error translation layer."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, TypeVar

from sqlalchemy import exc as sa_exc

__all__ = [
    "AppError",
    "RepositoryError",
    "NotFoundError",
    "IntegrityConstraintViolation",
    "DatabaseOperationError",
    "ensure_found",
    "handle_sqlalchemy_errors",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AppError(Exception):
    """Base class for application specific errors."""


class RepositoryError(AppError):
    """Base class for persistence layer failures."""

    def __init__(self, message: str, *, entity: str | None = None) -> None:
        super().__init__(f"{entity}: {message}" if entity else message)
        self.entity = entity


class NotFoundError(RepositoryError):
    """Raised when a record could not be located."""

    def __init__(self, *, entity: str, identifier: str) -> None:
        super().__init__(f"'{identifier}' not found", entity=entity)
        self.identifier = identifier


class IntegrityConstraintViolation(RepositoryError):
    """Raised when a database constraint is violated (duplicate email, missing owner)."""


class DatabaseOperationError(RepositoryError):
    """Raised for driver level failures: locked database, lost connection."""


def ensure_found(record: T | None, *, entity: str, identifier: str) -> T:
    """Return ``record`` or raise :class:`NotFoundError`."""
    if record is None:
        raise NotFoundError(entity=entity, identifier=identifier)
    return record


def _translate(exc: sa_exc.SQLAlchemyError, entity: str | None) -> RepositoryError:
    if isinstance(exc, sa_exc.IntegrityError):
        return IntegrityConstraintViolation("integrity constraint violated", entity=entity)
    if isinstance(exc, sa_exc.DBAPIError):
        return DatabaseOperationError("database operation failed", entity=entity)
    return RepositoryError(str(exc), entity=entity)


@contextmanager
def handle_sqlalchemy_errors(*, entity: str | None = None) -> Iterator[None]:
    """Translate SQLAlchemy errors raised in the block into repository errors."""
    try:
        yield
    except sa_exc.SQLAlchemyError as exc:
        translated = _translate(exc, entity)
        logger.warning(
            "repository.error",
            extra={"entity": entity, "error_type": type(translated).__name__, "error": str(exc)},
        )
        raise translated from exc
