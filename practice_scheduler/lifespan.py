"""Lifespan management for the FastAPI application.

Resources are created at startup, stored on ``app.state`` and released at
shutdown.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from fastapi import FastAPI

from practice_scheduler.config import get_settings
from practice_scheduler.db import Database

logger = logging.getLogger(__name__)


@dataclass
class LifespanResources:
    """Container for resources initialized during lifespan."""

    database: Database | None = None


async def init_database() -> Database | None:
    """Open the database connection pool.

    Returns:
        The open Database, or None when DATABASE_URL is not configured or the
        pool could not be opened.
    """
    settings = get_settings().database
    if not settings.configured:
        logger.error("DATABASE_URL environment variable is not set; storage endpoints will fail")
        return None
    database = Database(settings)
    try:
        await database.open()
    except Exception as e:
        logger.warning("Failed to initialize database: %s", e)
        await database.close()
        return None
    return database


async def setup_resources(app: FastAPI) -> LifespanResources:
    """Set up all shared resources and publish them on ``app.state``."""
    resources = LifespanResources()
    resources.database = await init_database()
    app.state.database = resources.database
    return resources


async def cleanup_resources(app: FastAPI, resources: LifespanResources) -> None:
    """Clean up all resources on shutdown."""
    if resources.database is not None:
        try:
            await resources.database.close()
        except Exception as e:
            logger.warning("Failed to close database: %s", e)
    app.state.database = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    resources = await setup_resources(app)
    try:
        yield
    finally:
        await cleanup_resources(app, resources)
