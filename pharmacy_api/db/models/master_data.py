from __future__ import annotations

from typing import Optional

from sqlalchemy import ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pharmacy_api.db.base import Base


class Manufacturer(Base):
    """Drug manufacturer master."""
    __tablename__ = "tbl_manufacturers"

    manufacturer_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    manufacturer_name: Mapped[str] = mapped_column(String(255), nullable=False)
    contact_person: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)


class ActiveIngredient(Base):
    """Active pharmaceutical ingredient."""
    __tablename__ = "tbl_active_ingredients"

    ingredient_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    ingredient_name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class Product(Base):
    """Sellable product; references its manufacturer and active ingredient."""
    __tablename__ = "tbl_products"

    product_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_name: Mapped[str] = mapped_column(String(255), nullable=False)
    manufacturer_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("tbl_manufacturers.manufacturer_id"), nullable=True
    )
    price: Mapped[Optional[float]] = mapped_column(Numeric(10, 2), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    active_ingredient_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("tbl_active_ingredients.ingredient_id"), nullable=True
    )
    stock_quantity: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
