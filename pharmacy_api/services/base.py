from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession


class BaseService:
    """
    Base class for services. Holds a session for use across multiple repositories.

    Services own transaction boundaries for operations that touch more than one
    table, delegating data access to repositories.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
