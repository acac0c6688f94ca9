from __future__ import annotations

import logging
from typing import Any, AsyncGenerator, Dict

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from .config import get_settings

logger = logging.getLogger(__name__)

_ENGINE: AsyncEngine | None = None
_SESSION_MAKER: async_sessionmaker[AsyncSession] | None = None


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA foreign_keys=ON")
    finally:
        cursor.close()


def _ensure_engine_initialized() -> None:
    """
    Lazily initialize the AsyncEngine and session maker from the current settings.
    """
    global _ENGINE, _SESSION_MAKER
    if _ENGINE is None:
        settings = get_settings()
        engine_kwargs: Dict[str, Any] = dict(echo=settings.SQL_ECHO, pool_pre_ping=True)
        if settings.is_sqlite:
            # aiosqlite connections are bound to the loop that opened them
            engine_kwargs["poolclass"] = NullPool
        _ENGINE = create_async_engine(settings.async_database_url, **engine_kwargs)
        if settings.is_sqlite:
            event.listen(_ENGINE.sync_engine, "connect", _enable_sqlite_foreign_keys)
        logger.info("Database engine created for dialect %s", _ENGINE.dialect.name)
    if _SESSION_MAKER is None:
        _SESSION_MAKER = async_sessionmaker(
            bind=_ENGINE, expire_on_commit=False, autoflush=False, autocommit=False
        )


# PUBLIC_INTERFACE
def get_engine() -> AsyncEngine:
    """Return the global AsyncEngine instance."""
    _ensure_engine_initialized()
    assert _ENGINE is not None
    return _ENGINE


# PUBLIC_INTERFACE
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Return the global session factory."""
    _ensure_engine_initialized()
    assert _SESSION_MAKER is not None
    return _SESSION_MAKER


# PUBLIC_INTERFACE
async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Yield an AsyncSession suitable for FastAPI dependency injection.
    Ensures engine/session factory is initialized.
    """
    maker = get_session_maker()
    async with maker() as session:
        yield session


# PUBLIC_INTERFACE
async def check_database() -> bool:
    """Return True when a trivial statement can be executed against the database."""
    async with get_engine().connect() as conn:
        await conn.execute(text("SELECT 1"))
    return True


# PUBLIC_INTERFACE
async def dispose_engine() -> None:
    """
    Dispose the global engine and forget it, so the next use re-reads settings.
    """
    global _ENGINE, _SESSION_MAKER
    if _ENGINE is not None:
        await _ENGINE.dispose()
    _ENGINE = None
    _SESSION_MAKER = None
