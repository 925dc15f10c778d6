"""Database migrations module.

This module provides a simple migration system for managing database schema changes.
Migrations are versioned SQL files that are applied in order.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from practice_scheduler.db.core import Database

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).parent

_CREATE_MIGRATIONS_TABLE = """
    CREATE SCHEMA IF NOT EXISTS practice_scheduler;
    CREATE TABLE IF NOT EXISTS practice_scheduler.schema_migrations (
        version INTEGER PRIMARY KEY,
        applied_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
        description TEXT
    );
"""


async def get_current_version(db: Database) -> int:
    """Get the current migration version from the database."""
    async with db.connection() as conn:
        await conn.execute(_CREATE_MIGRATIONS_TABLE)
        cur = await conn.execute(
            "SELECT COALESCE(MAX(version), 0) FROM practice_scheduler.schema_migrations"
        )
        row = await cur.fetchone()
        return int(row[0]) if row and row[0] else 0


async def apply_migration(db: Database, version: int, sql: str, description: str = "") -> bool:
    """Apply a single migration.

    Args:
        db: The open database.
        version: The migration version number.
        sql: The SQL to execute.
        description: Optional description of the migration.

    Returns:
        True if migration was applied, False if already applied.
    """
    current = await get_current_version(db)
    if version <= current:
        logger.debug("Migration %d already applied", version)
        return False

    async with db.connection() as conn:
        try:
            async with conn.transaction():
                await conn.execute(sql)
                await conn.execute(
                    """
                    INSERT INTO practice_scheduler.schema_migrations (version, description)
                    VALUES (%s, %s)
                    """,
                    (version, description),
                )
        except Exception as e:
            logger.error("Failed to apply migration %d: %s", version, e)
            raise

    logger.info("Applied migration %d: %s", version, description)
    return True


def list_migration_files() -> list[dict[str, Any]]:
    """List migration files shipped with the package, ordered by version."""
    migrations = []
    for path in sorted(MIGRATIONS_DIR.glob("*.sql")):
        # "001_create_events.sql" -> 1
        try:
            version = int(path.stem.split("_")[0])
        except (ValueError, IndexError):
            continue
        migrations.append({
            "version": version,
            "filename": path.name,
            "description": "_".join(path.stem.split("_")[1:]),
            "path": path,
        })
    return sorted(migrations, key=lambda m: m["version"])


async def get_pending_migrations(db: Database) -> list[dict[str, Any]]:
    """Get list of pending migrations.

    Returns:
        List of migration info dicts with version, filename, and description.
    """
    current = await get_current_version(db)
    return [m for m in list_migration_files() if m["version"] > current]


async def run_migrations(db: Database) -> int:
    """Run all pending migrations.

    Returns:
        Number of migrations applied.
    """
    applied = 0
    for migration in await get_pending_migrations(db):
        sql = migration["path"].read_text()
        if await apply_migration(db, migration["version"], sql, migration["description"]):
            applied += 1

    if applied:
        logger.info("Applied %d migrations", applied)
    else:
        logger.debug("No pending migrations")
    return applied


async def get_migration_history(db: Database) -> list[dict[str, Any]]:
    """Get the history of applied migrations.

    Returns:
        List of applied migrations with version, applied_at, and description.
    """
    async with db.connection() as conn:
        await conn.execute(_CREATE_MIGRATIONS_TABLE)
        cur = await conn.execute(
            """
            SELECT version, applied_at, description
            FROM practice_scheduler.schema_migrations
            ORDER BY version
            """
        )
        return [
            {"version": version, "applied_at": applied_at, "description": description}
            async for version, applied_at, description in cur
        ]
