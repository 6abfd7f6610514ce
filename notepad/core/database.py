"""
Database Configuration.

The storage handle: one async SQLAlchemy engine plus its session factory,
wrapped in an explicitly constructed `Database` object. The application
lifespan builds it, stores it on `app.state.database` and disposes it at
shutdown. Request handlers receive sessions through `get_db_session`.

Transaction model:
    One session per request. Everything a request does happens inside a
    single transaction that is committed when the handler returns and
    rolled back if it raises. Multi-step operations (the archive
    transition) therefore commit atomically or not at all.
"""

from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from notepad.core.exceptions import DatabaseError
from notepad.core.logging import get_logger

logger = get_logger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    """SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Storage handle shared by all requests of one process.

    Usage:
        database = Database.from_config()
        async with database.session() as session:
            ...
        await database.dispose()
    """

    def __init__(self, url: str, **engine_options: Any) -> None:
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, **engine_options)
        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        if self.is_sqlite:
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    @classmethod
    def from_config(cls) -> "Database":
        """Build the handle from database.yaml and the DB_PASSWORD secret."""
        from notepad.core.config import get_app_config, get_database_url

        db_config = get_app_config().database
        url = get_database_url()

        options: dict[str, Any] = {"echo": db_config.echo, "pool_pre_ping": True}
        if not url.startswith("sqlite"):
            options.update(
                pool_size=db_config.pool_size,
                max_overflow=db_config.max_overflow,
                pool_timeout=db_config.pool_timeout,
                pool_recycle=db_config.pool_recycle,
            )
            if db_config.ssl:
                options["connect_args"] = {"ssl": True}

        database = cls(url, **options)
        logger.debug(
            "Database engine created",
            extra={"host": db_config.host, "pool_size": db_config.pool_size},
        )
        return database

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Open a session whose work is committed on success and rolled back on error.

        Raises:
            DatabaseError: If the commit itself fails
        """
        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

            try:
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                logger.error("Commit failed", extra={"error": str(e)})
                raise DatabaseError("Failed to commit transaction") from e

    async def create_tables(self) -> None:
        """Create all tables that do not exist yet."""
        from notepad.models import Base

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables checked/created")

    async def ping(self) -> None:
        """Run a trivial query; raises if the database is unreachable."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()
        logger.debug("Database engine disposed")


def get_database(request: Request) -> Database:
    """Return the storage handle owned by the running application."""
    return request.app.state.database


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency that provides the session of one request.

    Endpoints take it through `DbSession`, which closes it with function
    scope. Commit errors then reach the exception handlers.
    """
    async with get_database(request).session() as session:
        yield session
