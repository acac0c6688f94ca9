from __future__ import annotations

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, func, inspect, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pharmacy_api.db.base import Base
from .base import BaseRepository

ModelT = TypeVar("ModelT", bound=Base)


class CrudRepository(BaseRepository, Generic[ModelT]):
    """
    Single-table repository used by every resource endpoint.

    Each mutating method runs exactly one statement and commits it. The column
    names in `values` come from a schema whitelist, never from raw client keys.
    """

    def __init__(self, session: AsyncSession, model: Type[ModelT]) -> None:
        super().__init__(session)
        self.model = model
        self.pk = inspect(model).primary_key[0]

    async def list_all(self) -> List[ModelT]:
        stmt = select(self.model).order_by(self.pk)
        res = await self.scalars(stmt)
        return list(res)

    async def get(self, row_id: Any) -> Optional[ModelT]:
        stmt = select(self.model).where(self.pk == row_id)
        return await self.scalar_one_or_none(stmt)

    async def count(self) -> int:
        result = await self.execute(select(func.count()).select_from(self.model))
        return int(result.scalar_one())

    async def create(self, values: Dict[str, Any]) -> Any:
        """Insert one row and return its primary key value."""
        row = self.model(**values)
        await self.add(row)
        await self.flush()
        new_id = getattr(row, self.pk.key)
        await self.commit()
        return new_id

    async def update(self, row_id: Any, values: Dict[str, Any]) -> int:
        """Apply a partial update; return the number of matched rows."""
        stmt = (
            update(self.model)
            .where(self.pk == row_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await self.execute(stmt)
        await self.commit()
        return result.rowcount or 0

    async def delete(self, row_id: Any) -> int:
        """Delete by primary key; return the number of deleted rows."""
        stmt = delete(self.model).where(self.pk == row_id).execution_options(
            synchronize_session=False
        )
        result = await self.execute(stmt)
        await self.commit()
        return result.rowcount or 0
