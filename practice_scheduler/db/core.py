"""Core database connection pool management."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

import psycopg
from psycopg_pool import AsyncConnectionPool

from practice_scheduler.config import DatabaseSettings

_logger = logging.getLogger(__name__)

SCHEMA = "practice_scheduler"


class Database:
    """Owns the connection pool for one process.

    Built from DatabaseSettings, opened in the application lifespan and
    closed on shutdown. Persistence functions receive it explicitly.
    """

    def __init__(self, settings: DatabaseSettings) -> None:
        self._settings = settings
        self._pool: AsyncConnectionPool | None = None

    @property
    def is_open(self) -> bool:
        return self._pool is not None

    async def open(self) -> None:
        if self._pool is not None:
            return
        settings = self._settings
        pool = AsyncConnectionPool(
            settings.get_dsn(),
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
            timeout=settings.pool_timeout,
            max_lifetime=settings.pool_max_lifetime,
            max_idle=settings.pool_max_idle,
            check=AsyncConnectionPool.check_connection,
            open=False,
        )
        await pool.open()
        self._pool = pool
        _logger.info(
            "Database connection pool initialized "
            "(min=%d, max=%d, timeout=%ss, max_lifetime=%ss, max_idle=%ss)",
            settings.pool_min_size,
            settings.pool_max_size,
            settings.pool_timeout,
            settings.pool_max_lifetime,
            settings.pool_max_idle,
        )
        if settings.run_migrations:
            # Import here to avoid circular imports
            from practice_scheduler.db.schema import ensure_schema

            await ensure_schema(self)

    async def close(self) -> None:
        if self._pool is not None:
            await self._pool.close()
            self._pool = None
            _logger.info("Database connection pool closed")

    @asynccontextmanager
    async def connection(self, autocommit: bool = True) -> AsyncIterator[psycopg.AsyncConnection]:
        if self._pool is None:
            raise RuntimeError("Database pool is not open")
        async with self._pool.connection() as conn:
            if autocommit:
                await conn.set_autocommit(True)
            yield conn

    async def ping(self) -> bool:
        """Check that a pooled connection answers a trivial query."""
        try:
            async with self.connection() as conn:
                await conn.execute("SELECT 1")
            return True
        except Exception as e:
            _logger.warning("Database health check failed: %s", e)
            return False

    def get_stats(self) -> dict[str, object]:
        """Get current pool statistics for monitoring."""
        if self._pool is None:
            return {"status": "not_initialized"}
        stats = self._pool.get_stats()
        return {
            "status": "active",
            "size": stats.get("pool_size"),
            "available": stats.get("pool_available"),
            "waiting": stats.get("requests_waiting"),
            "min_size": stats.get("pool_min"),
            "max_size": stats.get("pool_max"),
        }


__all__ = ["Database", "SCHEMA"]
