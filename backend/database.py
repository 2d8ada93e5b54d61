"""
Store client: async SQLAlchemy engine and session factory.

A ``Store`` is created once per process in the application lifespan, held on
``app.state.store`` and handed to request handlers through ``get_db``. It owns
the engine; ``dispose()`` releases pooled connections at shutdown.
"""
import logging
from typing import AsyncIterator, Optional

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool

logger = logging.getLogger(__name__)

Base = declarative_base()


class Store:
    """Owns the async engine and hands out sessions."""

    def __init__(self, database_url: str, echo: bool = False, pooled: bool = True):
        """
        Create the engine and session factory.

        Args:
            database_url: SQLAlchemy async URL (e.g. ``sqlite+aiosqlite:///./exercise-track.db``)
            echo: Echo SQL statements to the log
            pooled: Keep a connection pool; pass False to open a fresh
                connection per session (used by the test suite)
        """
        self.database_url = database_url
        engine_kwargs = {"echo": echo}
        if not pooled:
            engine_kwargs["poolclass"] = NullPool
        self.engine: AsyncEngine = create_async_engine(database_url, **engine_kwargs)

        if self.engine.dialect.name == "sqlite":
            @event.listens_for(self.engine.sync_engine, "connect")
            def set_sqlite_pragma(dbapi_conn, connection_record):
                cursor = dbapi_conn.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.execute("PRAGMA busy_timeout=5000")  # Wait up to 5s for locks
                cursor.close()

        self.session_factory = async_sessionmaker(self.engine, expire_on_commit=False)

    async def create_all(self) -> None:
        """Create any missing tables."""
        # Registers the mapped classes on Base.metadata
        import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info(f"Store ready: {self.engine.url.render_as_string(hide_password=True)}")

    def session(self) -> AsyncSession:
        """Open a new session. Callers own closing it."""
        return self.session_factory()

    async def dispose(self) -> None:
        """Release pooled connections."""
        await self.engine.dispose()
        logger.info("Store disposed")


def get_store(request: Request) -> Store:
    """Dependency returning the process-wide store from app state."""
    store: Optional[Store] = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Store is not initialised; the application lifespan did not run")
    return store


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """Dependency for FastAPI routes. Uncommitted work is rolled back on close."""
    session = get_store(request).session()
    try:
        yield session
    finally:
        await session.close()
