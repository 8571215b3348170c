"""Schema creation and teardown for the userhub database."""

import logging
from pathlib import Path
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

import userhub.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from userhub.infrastructure.persistence.sqlalchemy.models.base import Base
from userhub_config.settings import get_settings

logger = logging.getLogger(__name__)


def ensure_sqlite_directory(database_url: str) -> None:
    """Make sure the directory of a file-backed SQLite URL exists."""
    if not database_url.startswith("sqlite") or ":memory:" in database_url:
        return
    Path(database_url.split("///", 1)[-1]).parent.mkdir(parents=True, exist_ok=True)


def describe_database_url(database_url: str) -> str:
    """Drop the ``user:password@`` part so the URL can be logged or printed."""
    return database_url.rsplit("@", 1)[-1]


def create_engine_from_settings() -> AsyncEngine:
    """A standalone engine for one-off jobs such as CLI commands."""
    settings = get_settings()
    ensure_sqlite_directory(settings.database_url)
    return create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
    )


async def _run_on_metadata(engine: Optional[AsyncEngine], operation: str) -> None:
    own_engine = engine is None
    engine = engine or create_engine_from_settings()
    try:
        async with engine.begin() as conn:
            await conn.run_sync(getattr(Base.metadata, operation))
    finally:
        if own_engine:
            await engine.dispose()


async def create_tables(engine: Optional[AsyncEngine] = None) -> None:
    """Create missing tables; existing tables and rows are left alone.

    Without ``engine`` a temporary one is built from settings and disposed
    afterwards.
    """
    logger.info("Creating missing tables")
    await _run_on_metadata(engine, "create_all")
    logger.info("Schema is up to date")


async def drop_tables(engine: Optional[AsyncEngine] = None) -> None:
    """Drop every userhub table, including all stored users."""
    logger.warning("Dropping all tables")
    await _run_on_metadata(engine, "drop_all")
    logger.info("Tables dropped")
