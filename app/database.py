"""Database engine and session management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from app.config.settings import DatabaseConfig

# Import models so they are attached to Base.metadata before table creation
from app.models import Base

logger = logging.getLogger(__name__)


def _create_engine(config: DatabaseConfig, *, debug: bool = False) -> AsyncEngine:
    """Create an async engine with environment-appropriate pooling."""

    engine_options: dict[str, Any] = {
        "echo": debug,
        "future": True,
    }

    if config.url.startswith("sqlite"):
        # Each aiosqlite connection owns a thread; do not keep them around.
        engine_options["poolclass"] = NullPool
    else:
        engine_options["pool_pre_ping"] = True

    return create_async_engine(config.url, **engine_options)


class Database:
    """Owns the async engine and hands out sessions bound to it."""

    def __init__(self, config: DatabaseConfig, *, debug: bool = False) -> None:
        self.config = config
        self.engine: AsyncEngine = _create_engine(config, debug=debug)
        self.session_factory = async_sessionmaker(
            self.engine,
            expire_on_commit=False,
            class_=AsyncSession,
        )

    @asynccontextmanager
    async def session_scope(self) -> AsyncIterator[AsyncSession]:
        """Async context manager that yields a configured SQLAlchemy session."""

        async with self.session_factory() as session:
            yield session

    async def init_models(self) -> None:
        """Create database tables if they do not exist."""

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        logger.info("Ensured database tables in default schema.")

    async def dispose(self) -> None:
        """Dispose of the engine and release pooled connections."""

        await self.engine.dispose()


async def get_session(request: Request) -> AsyncIterator[AsyncSession]:
    """FastAPI dependency-compatible generator yielding a configured session."""

    database: Database = request.app.state.database
    async with database.session_scope() as session:
        yield session
