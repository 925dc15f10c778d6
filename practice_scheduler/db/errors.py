"""Storage-layer exceptions, independent of HTTP."""

import psycopg
from psycopg import errors as pg_errors


class StorageError(Exception):
    """Base class for failures raised by persistence functions."""

    def __init__(self, message: str, detail: str | None = None, code: str | None = None) -> None:
        self.message = message
        self.detail = detail
        self.code = code
        super().__init__(message)


class ConstraintViolation(StorageError):
    """The store rejected a write (duplicate key, broken reference, ...)."""


class InvalidValue(StorageError):
    """The store could not accept a value (SQLSTATE class 22, e.g. NUL in text)."""


class UnexpectedStorageError(StorageError):
    """Any other store failure."""


_CONSTRAINT_ERRORS = (
    pg_errors.UniqueViolation,
    pg_errors.ForeignKeyViolation,
    pg_errors.NotNullViolation,
    pg_errors.CheckViolation,
)


def translate_error(exc: psycopg.Error) -> StorageError:
    """Map a psycopg error onto the storage taxonomy."""
    diag = getattr(exc, "diag", None)
    message = (diag.message_primary if diag else None) or str(exc)
    detail = diag.message_detail if diag else None
    if isinstance(exc, _CONSTRAINT_ERRORS):
        return ConstraintViolation(message, detail=detail, code=exc.sqlstate)
    if isinstance(exc, psycopg.DataError):
        return InvalidValue(message, detail=detail, code=exc.sqlstate)
    return UnexpectedStorageError(message, detail=detail, code=exc.sqlstate)
