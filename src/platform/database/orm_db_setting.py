"""
SQLAlchemy async engine and session management

This module provides:
1. AsyncEngineManager: owns the engine and session maker, re-created when the event loop changes
2. Base: declarative base shared by every ORM model
3. Database: session factory handed to repositories through the DI container

SQLite URLs (sqlite+aiosqlite) are accepted for local runs and tests; pool sizing
options are only applied to server databases.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


class AsyncEngineManager:
    """
    Keeps a single async engine bound to the running event loop.

    A new loop (e.g. each TestClient / anyio.run) gets a fresh engine so
    connections never cross loops.
    """

    def __init__(self, *, url: str, echo: bool = False) -> None:
        self._url = url
        self._echo = echo
        self._engine: Optional[AsyncEngine] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def url(self) -> str:
        return self._url

    def get_engine(self) -> AsyncEngine:
        try:
            current_loop = asyncio.get_running_loop()
        except RuntimeError:
            if self._engine is None:
                self._engine = self._create_engine()
            return self._engine

        if self._loop is not current_loop:
            if self._engine is not None:
                Logger.base.warning('🔄 [DB] Event loop changed, dropping old engine')
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
        self._session_maker = None
        self._loop = None

    def _create_engine(self) -> AsyncEngine:
        options: dict[str, Any] = {'echo': self._echo}
        if not self._url.startswith('sqlite'):
            options |= {
                'pool_size': settings.DB_POOL_SIZE,
                'max_overflow': settings.DB_POOL_MAX_OVERFLOW,
                'pool_timeout': settings.DB_POOL_TIMEOUT,
                'pool_recycle': settings.DB_POOL_RECYCLE,
                'pool_pre_ping': settings.DB_POOL_PRE_PING,
            }
        return create_async_engine(self._url, **options)


class Base(DeclarativeBase):
    pass


class Database:
    """
    Session factory for repositories.

    Repositories receive ``database.session`` and open one short-lived
    session per operation.
    """

    def __init__(self, *, url: Optional[str] = None, echo: Optional[bool] = None) -> None:
        self._engine_manager = AsyncEngineManager(
            url=url or settings.DATABASE_URL_ASYNC,
            echo=settings.DB_ECHO if echo is None else echo,
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine_manager.get_engine()

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session; rolled back automatically if the block raises."""
        session_maker = self._engine_manager.get_session_maker()
        async with session_maker() as session:
            yield session

    async def dispose(self) -> None:
        await self._engine_manager.dispose()


async def create_db_and_tables(database: Database) -> None:
    """Create database tables if they don't exist"""
    # Register every mapped class on Base.metadata before create_all
    import src.service.booking.driven_adapter.model  # noqa: F401

    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all, checkfirst=True)
    Logger.base.info('🗄️  [DB] Tables ensured')


async def drop_db_and_tables(database: Database) -> None:
    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
