"""
Storage error variants raised by the repository layer.

Repositories never leak SQLAlchemy exceptions to callers. Every failure is
re-raised as exactly one of:

- UniqueViolation:     a unique constraint/index rejected the write
- ForeignKeyViolation: a referenced row does not exist
- NotFound:            the row addressed by an update/delete does not exist
- Other:               anything else, carrying the underlying message

classify_integrity_error() turns an IntegrityError into one of the variants,
using the Postgres SQLSTATE when the driver exposes it and falling back to the
message text (SQLite, MySQL).
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

__all__ = [
    "StorageError",
    "UniqueViolation",
    "ForeignKeyViolation",
    "NotFound",
    "Other",
    "classify_integrity_error",
    "from_sqlalchemy_error",
]

log = logging.getLogger(__name__)


class StorageError(Exception):
    """Base class of all storage error variants."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UniqueViolation(StorageError):
    def __init__(self, message: str = "Unique constraint violated", *, constraint: Optional[str] = None) -> None:
        super().__init__(message)
        self.constraint = constraint


class ForeignKeyViolation(StorageError):
    def __init__(self, message: str = "Foreign key constraint violated", *, constraint: Optional[str] = None) -> None:
        super().__init__(message)
        self.constraint = constraint


class NotFound(StorageError):
    def __init__(self, entity: str, entity_id: int) -> None:
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class Other(StorageError):
    """Uncategorized storage failure."""


# https://www.postgresql.org/docs/current/errcodes-appendix.html
_PG_UNIQUE_VIOLATION = "23505"
_PG_FOREIGN_KEY_VIOLATION = "23503"


def _orig_message(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig if orig is not None else exc).strip()


def classify_integrity_error(exc: IntegrityError) -> StorageError:
    """
    Map an IntegrityError to a storage error variant.
    """
    orig = getattr(exc, "orig", None)
    message = _orig_message(exc)

    pgcode = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if pgcode:
        diag = getattr(orig, "diag", None)
        constraint = getattr(diag, "constraint_name", None) if diag else None
        if pgcode == _PG_UNIQUE_VIOLATION:
            return UniqueViolation(message, constraint=constraint)
        if pgcode == _PG_FOREIGN_KEY_VIOLATION:
            return ForeignKeyViolation(message, constraint=constraint)
        log.debug("Unmapped integrity error code", extra={"pgcode": pgcode, "constraint_name": constraint})
        return Other(message)

    normalized = message.lower()
    if any(k in normalized for k in ("unique constraint", "unique failed", "duplicate")):
        return UniqueViolation(message)
    if "foreign key" in normalized:
        return ForeignKeyViolation(message)
    return Other(message)


def from_sqlalchemy_error(exc: SQLAlchemyError) -> StorageError:
    """
    Map any SQLAlchemy exception to a storage error variant.
    """
    if isinstance(exc, IntegrityError):
        return classify_integrity_error(exc)
    return Other(_orig_message(exc))
