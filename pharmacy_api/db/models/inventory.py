from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from pharmacy_api.db.base import Base


class InventoryItem(Base):
    """Stock batch of a product held at a location."""
    __tablename__ = "tbl_inventory"

    inventory_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("tbl_products.product_id"), nullable=False
    )
    batch_number: Mapped[str] = mapped_column(String(255), nullable=False)
    expiry_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
