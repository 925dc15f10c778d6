from practice_scheduler.db.core import SCHEMA, Database
from practice_scheduler.db.errors import (
    ConstraintViolation,
    InvalidValue,
    StorageError,
    UnexpectedStorageError,
)
from practice_scheduler.db.scheduler import (
    create_event,
    create_response,
    delete_event,
    get_event,
    get_event_with_responses,
    get_responses_by_event,
)
from practice_scheduler.db.schema import ensure_schema, get_schema_info

__all__ = [
    "SCHEMA",
    "ConstraintViolation",
    "Database",
    "InvalidValue",
    "StorageError",
    "UnexpectedStorageError",
    "create_event",
    "create_response",
    "delete_event",
    "ensure_schema",
    "get_event",
    "get_event_with_responses",
    "get_responses_by_event",
    "get_schema_info",
]
