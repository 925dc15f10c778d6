"""Dependency injection for FastAPI endpoints.

The Database created by the lifespan lives on ``app.state``; endpoints
receive it through these dependencies instead of reaching for globals.

Usage in controllers:
    from practice_scheduler import db
    from practice_scheduler.dependencies import DB

    @router.get("/example")
    async def example(database: DB):
        return await db.get_event(database, "abc")
"""

from typing import Annotated

from fastapi import Depends, Request

from practice_scheduler.config import get_settings
from practice_scheduler.db import Database
from practice_scheduler.errors import ConfigurationError, DatabaseError


def get_database(request: Request) -> Database:
    """Get the open Database.

    Raises:
        ConfigurationError: If DATABASE_URL is not configured.
        DatabaseError: If the pool failed to open at startup.

    Returns:
        The Database instance.
    """
    settings = get_settings().database
    if not settings.configured:
        raise ConfigurationError(
            detail="Server configuration error: DATABASE_URL not configured"
        )
    database = getattr(request.app.state, "database", None)
    if database is None or not database.is_open:
        raise DatabaseError(detail="Database not initialized")
    return database


def get_optional_database(request: Request) -> Database | None:
    """Get the Database if one was opened, or None."""
    database = getattr(request.app.state, "database", None)
    if database is None or not database.is_open:
        return None
    return database


DB = Annotated[Database, Depends(get_database)]
OptionalDB = Annotated[Database | None, Depends(get_optional_database)]
