"""
SQLAlchemy async engine and session management

This module provides:
1. AsyncEngineManager: one engine per running event loop
2. Base: declarative base for every ORM model
3. create_db_and_tables / verify_schema: startup helpers
4. Database: session factory handed to repositories through DI
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from sqlalchemy import inspect
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import SchemaMismatchError
from src.platform.logging.loguru_io import Logger


# =============================================================================
# Event-loop-aware Engine Manager
# =============================================================================


class AsyncEngineManager:
    """
    Manages the SQLAlchemy async engine with event loop awareness.

    Ensures the engine is always bound to the current event loop to prevent
    "Task got Future attached to a different loop" errors (TestClient and
    pytest-asyncio each run their own loop).
    """

    def __init__(self) -> None:
        self._engine: Optional[AsyncEngine] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    def get_engine(self) -> AsyncEngine:
        try:
            current_loop = asyncio.get_running_loop()
        except RuntimeError:
            if self._engine is None:
                self._engine = self._create_engine()
            return self._engine

        if self._loop is not current_loop:
            if self._engine is not None:
                Logger.base.warning('🔄 [DB] Event loop changed, recreating engine...')
                self._session_maker = None
            Logger.base.info(f'🔗 [DB] Creating engine for event loop {id(current_loop)}')
            self._engine = self._create_engine()
            self._loop = current_loop

        return self._engine  # type: ignore[return-value]

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
        self._loop = None
        self._session_maker = None

    @staticmethod
    def _create_engine() -> AsyncEngine:
        engine_kwargs: dict[str, Any] = {'echo': settings.DB_ECHO}
        if settings.IS_SQLITE:
            # File-backed SQLite: one connection per session, nothing pinned to a loop
            engine_kwargs['poolclass'] = NullPool
        else:
            engine_kwargs |= {
                'pool_size': settings.DB_POOL_SIZE,
                'max_overflow': settings.DB_POOL_MAX_OVERFLOW,
                'pool_timeout': settings.DB_POOL_TIMEOUT,
                'pool_recycle': settings.DB_POOL_RECYCLE,
                'pool_pre_ping': settings.DB_POOL_PRE_PING,
            }
        return create_async_engine(settings.DATABASE_URL_ASYNC, **engine_kwargs)


_engine_manager = AsyncEngineManager()


def get_engine() -> AsyncEngine:
    return _engine_manager.get_engine()


def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return _engine_manager.get_session_maker()


async def dispose_engine() -> None:
    await _engine_manager.dispose()


# =============================================================================
# Base Model
# =============================================================================


class Base(DeclarativeBase):
    pass


# =============================================================================
# Schema helpers
# =============================================================================


async def create_db_and_tables() -> None:
    """Create database tables if they don't exist"""
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all, checkfirst=True)


def _collect_live_columns(sync_conn: Connection) -> dict[str, set[str]]:
    inspector = inspect(sync_conn)
    return {
        table_name: {column['name'] for column in inspector.get_columns(table_name)}
        for table_name in inspector.get_table_names()
    }


@Logger.io
async def verify_schema() -> None:
    """
    Compare the live schema against the mapped models.

    Every mapped table must exist and expose at least the mapped columns, so
    the explicit model-to-entity decoding in the repositories can never hit a
    missing column at request time.

    Raises:
        SchemaMismatchError: listing every missing table / column
    """
    async with get_engine().connect() as conn:
        live_columns = await conn.run_sync(_collect_live_columns)

    problems: list[str] = []
    for table in Base.metadata.sorted_tables:
        actual = live_columns.get(table.name)
        if actual is None:
            problems.append(f'missing table {table.name!r}')
            continue
        if missing := {column.name for column in table.columns} - actual:
            problems.append(f'table {table.name!r} missing columns {sorted(missing)}')

    if problems:
        raise SchemaMismatchError(f'Database schema mismatch: {"; ".join(problems)}')

    Logger.base.info(f'✅ [DB] Schema verified for {len(Base.metadata.sorted_tables)} tables')


# =============================================================================
# Database Class (for DI)
# =============================================================================


class Database:
    """Session factory for repositories; each `session()` is one unit of store access."""

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Note: the session maker context rolls back on exception and closes the session
        """
        async with get_session_maker()() as session:
            yield session
