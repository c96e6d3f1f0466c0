"""Database client — engines and session factories bound to the job board schema."""

import logging
from functools import cached_property, lru_cache
from typing import AsyncGenerator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobboard.config import get_settings
from jobboard.models import Base

logger = logging.getLogger(__name__)

# Async driver -> sync driver, for scripts and tests
SYNC_DRIVERS = {
    "postgresql+asyncpg://": "postgresql://",
    "sqlite+aiosqlite://": "sqlite://",
}


def to_sync_url(database_url: str) -> str:
    for async_prefix, sync_prefix in SYNC_DRIVERS.items():
        if database_url.startswith(async_prefix):
            return sync_prefix + database_url[len(async_prefix):]
    return database_url


def _is_sqlite(database_url: str) -> bool:
    return database_url.startswith("sqlite")


def _is_memory_sqlite(database_url: str) -> bool:
    return _is_sqlite(database_url) and (":memory:" in database_url or database_url.endswith("://"))


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores REFERENCES / ON DELETE CASCADE unless asked per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Process-wide database handle.

    Holds an async engine for application code and a sync engine for scripts,
    both bound to ``Base.metadata``. Engines are created on first use so a
    handle can be built without the other driver installed.
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 10,
        max_overflow: int = 20,
        pool_timeout: int = 30,
    ):
        self.database_url = database_url
        self.sync_database_url = to_sync_url(database_url)
        self.echo = echo
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.pool_timeout = pool_timeout
        self.metadata = Base.metadata

    def _engine_options(self, url: str) -> dict:
        if _is_memory_sqlite(url):
            return {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
        if _is_sqlite(url):
            return {}
        return {
            "pool_size": self.pool_size,
            "max_overflow": self.max_overflow,
            "pool_timeout": self.pool_timeout,
        }

    # Async engine for application code
    @cached_property
    def engine(self) -> AsyncEngine:
        engine = create_async_engine(
            self.database_url, echo=self.echo, **self._engine_options(self.database_url),
        )
        if _is_sqlite(self.database_url):
            event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        logger.info("Created async engine for %s", engine.url.render_as_string(hide_password=True))
        return engine

    @cached_property
    def session_factory(self) -> async_sessionmaker:
        return async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    # Sync engine for scripts and tests
    @cached_property
    def sync_engine(self) -> Engine:
        engine = create_engine(
            self.sync_database_url, echo=self.echo, **self._engine_options(self.sync_database_url),
        )
        if _is_sqlite(self.sync_database_url):
            event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        logger.info("Created sync engine for %s", engine.url.render_as_string(hide_password=True))
        return engine

    @cached_property
    def sync_session_factory(self) -> sessionmaker:
        return sessionmaker(
            bind=self.sync_engine,
            autocommit=False,
            autoflush=False,
        )

    async def create_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(self.metadata.create_all)
        logger.info("Database tables verified")

    def create_all_sync(self) -> None:
        self.metadata.create_all(self.sync_engine)
        logger.info("Database tables verified")

    async def dispose(self) -> None:
        # Only dispose engines that were actually created
        if "engine" in self.__dict__:
            await self.engine.dispose()
        if "sync_engine" in self.__dict__:
            self.sync_engine.dispose()


@lru_cache
def get_database() -> Database:
    settings = get_settings()
    return Database(
        settings.database_url,
        echo=settings.debug,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
    )


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with get_database().session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
