"""
SQLAlchemy async engine and session management

Database is the DI-managed owner of the engine/pool. Repositories never open
sessions themselves; a unit of work asks Database for one session per
transaction.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


class Base(DeclarativeBase):
    pass


def _engine_options(db_url: str) -> dict[str, Any]:
    # SQLite (local runs, tests) gets a fresh connection per session
    if db_url.startswith('sqlite'):
        return {'poolclass': NullPool}
    return {
        'pool_size': settings.DB_POOL_SIZE,
        'max_overflow': settings.DB_POOL_MAX_OVERFLOW,
        'pool_timeout': settings.DB_POOL_TIMEOUT,
        'pool_recycle': settings.DB_POOL_RECYCLE,
        'pool_pre_ping': settings.DB_POOL_PRE_PING,
    }


def _lock_sqlite_on_begin(engine: AsyncEngine) -> None:
    """
    Start every SQLite transaction with BEGIN IMMEDIATE

    SQLite ignores SELECT ... FOR UPDATE and the driver only opens a transaction on the
    first write, so read-validate-write would otherwise run unlocked. Taking the write lock
    at BEGIN serializes units of work the way the row lock does on PostgreSQL.
    """

    @event.listens_for(engine.sync_engine, 'connect')
    def _disable_driver_transactions(dbapi_connection: Any, connection_record: Any) -> None:
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, 'begin')
    def _begin_immediate(conn: Any) -> None:
        conn.exec_driver_sql('BEGIN IMMEDIATE')


class Database:
    """Database class for managing async sessions following dependency-injector best practices"""

    def __init__(self, db_url: str) -> None:
        self._engine = create_async_engine(db_url, echo=False, **_engine_options(db_url))
        if db_url.startswith('sqlite'):
            _lock_sqlite_on_begin(self._engine)
        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Context manager for database sessions"""
        async with self._session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def create_db_and_tables(self) -> None:
        """Create tables from ORM metadata (local runs and tests; production uses Alembic)"""
        # Register models on Base.metadata
        import src.service.webinar.driven_adapter.model  # noqa: F401

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)
        Logger.base.info('🗄️  [DB] Tables ensured')

    async def drop_all_tables(self) -> None:
        import src.service.webinar.driven_adapter.model  # noqa: F401

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def dispose(self) -> None:
        await self._engine.dispose()
        Logger.base.info('🗄️  [DB] Engine disposed')
