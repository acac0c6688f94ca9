"""
Database seeding utilities for sample pharmacy data.

Seeds (only into empty tables):
- Manufacturer (Acme Pharma)
- Active ingredients (Paracetamol, Ibuprofen)
- Products (Paracetamol 500mg, Ibuprofen 200mg) with one inventory batch each
- Supplier (MedSupply Ltd)
- Customer (Walk-in customer)

Usage:
  python -m pharmacy_api.db.run_migrations upgrade head
  python -m pharmacy_api.db.seed
"""

from __future__ import annotations

import asyncio
import logging
from datetime import date
from decimal import Decimal
from typing import Dict

from sqlalchemy.ext.asyncio import AsyncSession

from pharmacy_api.db.models import (
    ActiveIngredient,
    Customer,
    InventoryItem,
    Manufacturer,
    Product,
    Supplier,
)
from pharmacy_api.db.session import get_session_maker
from pharmacy_api.repositories.crud import CrudRepository

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
async def seed_all() -> Dict[str, int]:
    """
    Seed the database with sample reference data.

    Each table is only touched when it is empty, so running this twice is a no-op.
    Returns:
        Mapping of table name to the number of rows inserted.
    """
    inserted: Dict[str, int] = {}
    async with get_session_maker()() as session:
        manufacturer_id = await _seed_manufacturer(session, inserted)
        ingredient_ids = await _seed_ingredients(session, inserted)
        await _seed_products(session, inserted, manufacturer_id, ingredient_ids)
        await _seed_supplier(session, inserted)
        await _seed_customer(session, inserted)
    logger.info("Seed finished: %s", inserted or "nothing to do")
    return inserted


async def _is_empty(session: AsyncSession, model) -> bool:
    return await CrudRepository(session, model).count() == 0


async def _seed_manufacturer(session: AsyncSession, inserted: Dict[str, int]) -> int | None:
    repo = CrudRepository(session, Manufacturer)
    if not await _is_empty(session, Manufacturer):
        first = await repo.list_all()
        return first[0].manufacturer_id
    new_id = await repo.create(
        {
            "manufacturer_name": "Acme Pharma",
            "contact_person": "Dana Reyes",
            "phone": "555-0100",
            "email": "contact@acmepharma.example",
        }
    )
    inserted[Manufacturer.__tablename__] = 1
    return new_id


async def _seed_ingredients(session: AsyncSession, inserted: Dict[str, int]) -> Dict[str, int]:
    repo = CrudRepository(session, ActiveIngredient)
    if not await _is_empty(session, ActiveIngredient):
        return {row.ingredient_name: row.ingredient_id for row in await repo.list_all()}
    ids = {}
    for name, description in (
        ("Paracetamol", "Analgesic and antipyretic"),
        ("Ibuprofen", "Non-steroidal anti-inflammatory drug"),
    ):
        ids[name] = await repo.create({"ingredient_name": name, "description": description})
    inserted[ActiveIngredient.__tablename__] = len(ids)
    return ids


async def _seed_products(
    session: AsyncSession,
    inserted: Dict[str, int],
    manufacturer_id: int | None,
    ingredient_ids: Dict[str, int],
) -> None:
    if not await _is_empty(session, Product):
        return
    products = CrudRepository(session, Product)
    batches = CrudRepository(session, InventoryItem)
    catalog = (
        ("Paracetamol 500mg", "Paracetamol", Decimal("5.75"), 120, "PCM-2401"),
        ("Ibuprofen 200mg", "Ibuprofen", Decimal("10.00"), 80, "IBU-2402"),
    )
    for name, ingredient, price, stock, batch in catalog:
        product_id = await products.create(
            {
                "product_name": name,
                "manufacturer_id": manufacturer_id,
                "price": price,
                "description": f"{ingredient} tablets",
                "active_ingredient_id": ingredient_ids.get(ingredient),
                "stock_quantity": stock,
            }
        )
        await batches.create(
            {
                "product_id": product_id,
                "batch_number": batch,
                "expiry_date": date(date.today().year + 2, 12, 31),
                "quantity": stock,
                "location": "Shelf A",
            }
        )
    inserted[Product.__tablename__] = len(catalog)
    inserted[InventoryItem.__tablename__] = len(catalog)


async def _seed_supplier(session: AsyncSession, inserted: Dict[str, int]) -> None:
    if not await _is_empty(session, Supplier):
        return
    await CrudRepository(session, Supplier).create(
        {
            "supplier_name": "MedSupply Ltd",
            "contact_person": "Sam Patel",
            "phone": "555-0200",
            "email": "orders@medsupply.example",
            "address": "12 Harbour Road",
        }
    )
    inserted[Supplier.__tablename__] = 1


async def _seed_customer(session: AsyncSession, inserted: Dict[str, int]) -> None:
    if not await _is_empty(session, Customer):
        return
    await CrudRepository(session, Customer).create({"customer_name": "Walk-in customer"})
    inserted[Customer.__tablename__] = 1


if __name__ == "__main__":
    asyncio.run(seed_all())
