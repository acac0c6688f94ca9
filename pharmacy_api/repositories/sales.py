from __future__ import annotations

from typing import Optional

from sqlalchemy import select

from pharmacy_api.db.models.sales import Customer, Sale
from .base import BaseRepository


class CustomerRepository(BaseRepository):
    """Customer lookups used by the checkout flow."""

    async def find_by_phone(self, phone: str) -> Optional[Customer]:
        stmt = (
            select(Customer)
            .where(Customer.phone == phone)
            .order_by(Customer.customer_id)
            .limit(1)
        )
        return await self.scalar_one_or_none(stmt)

    async def find_by_name(self, name: str) -> Optional[Customer]:
        stmt = (
            select(Customer)
            .where(Customer.customer_name == name)
            .order_by(Customer.customer_id)
            .limit(1)
        )
        return await self.scalar_one_or_none(stmt)

    async def add_customer(self, *, name: str, phone: Optional[str]) -> Customer:
        """Stage a new customer and flush so its id is known; the caller commits."""
        row = Customer(customer_name=name, phone=phone)
        await self.add(row)
        await self.flush()
        return row


class SaleRepository(BaseRepository):
    """Sale writes used by the checkout flow."""

    async def add_sale(self, sale: Sale) -> Sale:
        await self.add(sale)
        await self.flush()
        return sale
