"""Database schema management module.

This module provides schema initialization using a migration-based approach.
Migrations are stored in the migrations/ subdirectory as versioned SQL files.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from practice_scheduler.db.migrations import get_current_version, get_migration_history, run_migrations

if TYPE_CHECKING:
    from practice_scheduler.db.core import Database

logger = logging.getLogger(__name__)


async def ensure_schema(db: Database) -> None:
    """Ensure the database schema is up to date by running pending migrations.

    This function is idempotent - it can be called multiple times safely.
    It will only apply migrations that haven't been applied yet.
    """
    current_version = await get_current_version(db)
    logger.info("Current schema version: %d", current_version)

    applied = await run_migrations(db)

    if applied > 0:
        new_version = await get_current_version(db)
        logger.info("Schema updated from version %d to %d", current_version, new_version)
    else:
        logger.debug("Schema is up to date at version %d", current_version)


async def get_schema_info(db: Database) -> dict:
    """Get information about the current schema state.

    Returns:
        Dict with current_version and migration_history.
    """
    return {
        "current_version": await get_current_version(db),
        "migration_history": await get_migration_history(db),
    }
