from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy import Date, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pharmacy_api.db.base import Base


class Supplier(Base):
    """Supplier/vendor master."""
    __tablename__ = "tbl_suppliers"

    supplier_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    supplier_name: Mapped[str] = mapped_column(String(255), nullable=False)
    contact_person: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class PurchaseOrder(Base):
    """Purchase order header. `status` is free text chosen by the client."""
    __tablename__ = "tbl_purchase_orders"

    po_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    supplier_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("tbl_suppliers.supplier_id"), nullable=False
    )
    order_date: Mapped[date] = mapped_column(Date, nullable=False)
    total_amount: Mapped[Optional[float]] = mapped_column(Numeric(10, 2), nullable=True)
    status: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
