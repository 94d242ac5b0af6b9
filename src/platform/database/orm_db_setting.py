"""
SQLAlchemy async engine and session management

This module provides:
1. Database: owns one async engine + session maker, handed out via DI
2. Base: declarative base shared by every model
3. create_db_and_tables: schema bootstrap used at startup and in tests

Isolation:
- PostgreSQL engines run every transaction at settings.DB_ISOLATION_LEVEL
  (SERIALIZABLE by default) so concurrent check-and-write units that slip
  past the in-process scoped locks fail with a serialization error instead
  of committing inconsistent state.
- SQLite serializes writers itself; pool and isolation options are skipped.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.platform.config.core_setting import settings
from src.platform.database.store_error import translate_store_errors
from src.platform.logging.loguru_io import Logger


class Base(DeclarativeBase):
    pass


def _is_sqlite(url: str) -> bool:
    return make_url(url).get_backend_name() == 'sqlite'


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute('PRAGMA foreign_keys=ON')
    cursor.close()


class Database:
    """
    Database handle for dependency injection

    Engine creation is lazy so importing the container never opens a connection.
    """

    def __init__(self, *, url: Optional[str] = None) -> None:
        self._url = url or settings.DATABASE_URL_ASYNC
        self._engine: Optional[AsyncEngine] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def url(self) -> str:
        return self._url

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            self._engine = self._create_engine()
            self._session_maker = async_sessionmaker(
                self._engine,
                class_=AsyncSession,
                expire_on_commit=False,
            )
        return self._engine

    def _create_engine(self) -> AsyncEngine:
        if _is_sqlite(self._url):
            engine = create_async_engine(
                self._url,
                echo=False,
                connect_args={'timeout': settings.LOCK_ACQUIRE_TIMEOUT_SECONDS},
            )
            event.listen(engine.sync_engine, 'connect', _enable_sqlite_foreign_keys)
            Logger.base.info(f'🗄️  [DB] SQLite engine created: {make_url(self._url).database}')
            return engine

        Logger.base.info(
            f'🗄️  [DB] Engine created with isolation_level={settings.DB_ISOLATION_LEVEL}'
        )
        return create_async_engine(
            self._url,
            echo=False,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_POOL_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=settings.DB_POOL_RECYCLE,
            pool_pre_ping=settings.DB_POOL_PRE_PING,
            isolation_level=settings.DB_ISOLATION_LEVEL,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Context manager for database sessions

        Note: async_sessionmaker's context manager closes the session on exit;
        any transaction still open at that point is rolled back. Retryable
        driver failures leave this block as TransientStoreFailureError.
        """
        self.engine  # ensure engine + session maker exist
        assert self._session_maker is not None
        async with translate_store_errors():
            async with self._session_maker() as session:
                yield session

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_maker = None
            Logger.base.info('🗄️  [DB] Engine disposed')


async def create_db_and_tables(database: Database) -> None:
    """
    Create database tables if they don't exist

    Models register on Base.metadata when their repo modules are imported,
    which importing the DI container already does.
    """
    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all, checkfirst=True)
    Logger.base.info('🗄️  [DB] Tables ensured')
