"""
SQLAlchemy async engine and session management

This module provides:
1. AsyncEngineManager: one engine per running event loop
2. Base: declarative base shared by every ORM model
3. Database: session factory wrapper injected into repositories

PostgreSQL (asyncpg) is the production backend. SQLite (aiosqlite) is supported
for local runs and tests; its transactions start with BEGIN IMMEDIATE so that
concurrent writers queue on the database lock instead of failing with
"database is locked" half-way through a transaction.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


# =============================================================================
# Event-loop-aware Engine Manager
# =============================================================================


def _enable_sqlite_immediate_transactions(engine: AsyncEngine) -> None:
    @event.listens_for(engine.sync_engine, 'connect')
    def _on_connect(dbapi_connection: Any, connection_record: Any) -> None:
        # Disable pysqlite's implicit BEGIN, the 'begin' hook below emits our own
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute('PRAGMA foreign_keys=ON')
        cursor.close()

    @event.listens_for(engine.sync_engine, 'begin')
    def _on_begin(conn: Any) -> None:
        conn.exec_driver_sql('BEGIN IMMEDIATE')


class AsyncEngineManager:
    """
    Manages the SQLAlchemy async engine with event loop awareness.

    Ensures the engine is always bound to the current event loop to prevent
    "Task got Future attached to a different loop" errors (TestClient runs the
    app on its own loop, async tests on another).
    """

    def __init__(self, database_url: str | None = None) -> None:
        self._database_url = database_url
        self._engine: Optional[AsyncEngine] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def database_url(self) -> str:
        return self._database_url or settings.DATABASE_URL_ASYNC

    def get_engine(self) -> AsyncEngine:
        try:
            current_loop = asyncio.get_running_loop()
        except RuntimeError:
            if self._engine is None:
                self._engine = self._create_engine()
                self._session_maker = None
            return self._engine

        if self._loop is not current_loop:
            if self._engine is not None:
                Logger.base.warning('🔄 [DB] Event loop changed, recreating engine...')
                self._engine = None
                self._session_maker = None

            Logger.base.info(f'🔗 [DB] Creating engine for event loop {id(current_loop)}')
            self._engine = self._create_engine()
            self._loop = current_loop

        assert self._engine is not None
        return self._engine

    def get_session_maker(self) -> async_sessionmaker[AsyncSession]:
        engine = self.get_engine()
        if self._session_maker is None:
            self._session_maker = async_sessionmaker(
                engine,
                class_=AsyncSession,
                expire_on_commit=False,
            )
        return self._session_maker

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._session_maker = None
        self._loop = None

    def _create_engine(self) -> AsyncEngine:
        url = self.database_url
        if url.startswith('sqlite'):
            engine = create_async_engine(
                url,
                echo=False,
                connect_args={'timeout': settings.DB_POOL_TIMEOUT},
            )
            _enable_sqlite_immediate_transactions(engine)
            return engine

        return create_async_engine(
            url,
            echo=False,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_POOL_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=settings.DB_POOL_RECYCLE,
            pool_pre_ping=settings.DB_POOL_PRE_PING,
            connect_args={
                'server_settings': {'statement_timeout': str(settings.DB_STATEMENT_TIMEOUT_MS)}
            },
        )


# Global engine manager
engine_manager = AsyncEngineManager()


def get_engine() -> AsyncEngine:
    return engine_manager.get_engine()


def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return engine_manager.get_session_maker()


# =============================================================================
# Base Model
# =============================================================================


class Base(DeclarativeBase):
    pass


# =============================================================================
# Table Creation
# =============================================================================


async def create_db_and_tables() -> None:
    """Create database tables if they don't exist"""
    # Register every model on Base.metadata
    import src.service.cinema_booking.driven_adapter.model  # noqa: F401

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all, checkfirst=True)
    Logger.base.info('🗄️  [DB] Tables ensured')


async def drop_db_and_tables() -> None:
    import src.service.cinema_booking.driven_adapter.model  # noqa: F401

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


# =============================================================================
# Database Class (for DI)
# =============================================================================


class Database:
    """
    Session factory for dependency injection

    Repositories receive `database.session` and open one short-lived session
    per operation; the session rolls back automatically on exception.
    """

    def __init__(self, manager: AsyncEngineManager | None = None) -> None:
        self._manager = manager or engine_manager

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        session_maker = self._manager.get_session_maker()
        async with session_maker() as session:
            yield session
