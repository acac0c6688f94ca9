from __future__ import annotations

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pharmacy_api.db.session import get_async_session


# PUBLIC_INTERFACE
async def get_session(
    session: AsyncSession = Depends(get_async_session),
) -> AsyncGenerator[AsyncSession, None]:
    """
    Yield a request-scoped AsyncSession.

    Each request gets its own session and transaction scope. Work that was not
    committed by the handler is rolled back before the session is released.
    """
    try:
        yield session
    finally:
        if session.in_transaction():
            await session.rollback()
