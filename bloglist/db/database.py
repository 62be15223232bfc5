"""Database engine and session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from bloglist.configs import settings
from bloglist.monitoring import get_logger

logger = get_logger(__name__)


def _engine_options(url: str) -> dict[str, Any]:
    """Return engine keyword arguments suited to the database backend."""
    if url.startswith("sqlite"):
        options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        # In-memory databases only live as long as their single connection
        if ":memory:" in url or url.rstrip("/").endswith(":"):
            options["poolclass"] = StaticPool
        return options

    return {
        "pool_size": settings.POOL_SIZE,
        "max_overflow": settings.MAX_OVERFLOW,
        "pool_timeout": settings.POOL_TIMEOUT,
        "pool_recycle": settings.POOL_RECYCLE,
        "pool_pre_ping": True,
    }


def _enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection."""

    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_connection: Any, connection_record: object) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


class Database:
    """
    Explicitly constructed persistence handle.

    Owns the async engine and the session factory. One instance is created at
    application startup, stored on ``app.state.database``, and disposed on
    shutdown.

    Example:
        ```python
        database = Database("sqlite+aiosqlite://")
        await database.init()
        async with database.transaction() as session:
            session.add(UserDB(username="root", password_hash="..."))
        await database.close()
        ```
    """

    def __init__(self, url: str, *, echo: bool = False) -> None:
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, echo=echo, **_engine_options(url))
        if url.startswith("sqlite"):
            _enable_sqlite_foreign_keys(self.engine)
        self.session_maker: async_sessionmaker[SQLModelAsyncSession] = async_sessionmaker(
            self.engine,
            class_=SQLModelAsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[AsyncSession]:
        """
        Yield a session bound to a single transaction.

        Commits on successful exit, rolls back on any exception.
        """
        async with self.session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                logger.debug("Transaction rolled back")
                raise

    async def init(self) -> None:
        """Create all tables defined in the SQLModel models."""
        async with self.engine.begin() as conn:
            from bloglist.models import BlogDB, UserDB  # noqa: F401, PLC0415

            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database initialized successfully!")

    async def ping(self) -> bool:
        """Return True when a trivial query succeeds."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception:
            logger.exception("Database ping failed")
            return False
        return True

    async def close(self) -> None:
        """Dispose of every pooled connection."""
        await self.engine.dispose()
        logger.info("Database connections closed")
