from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from .common import NameStr, NonNegativeInt, PositiveId, ShortStr


class InventoryRead(BaseModel):
    """Inventory batch read model."""
    inventory_id: int = Field(..., description="Inventory row ID")
    product_id: int = Field(..., description="Product")
    batch_number: str = Field(..., description="Batch/lot number")
    expiry_date: Optional[date] = Field(None)
    quantity: int = Field(..., description="Units in this batch")
    location: Optional[str] = Field(None)

    class Config:
        from_attributes = True


class InventoryCreate(BaseModel):
    """Create inventory batch payload."""
    product_id: PositiveId = Field(..., description="Product id")
    batch_number: NameStr = Field(..., description="Batch number")
    expiry_date: date = Field(..., description="Expiry date (YYYY-MM-DD)")
    quantity: NonNegativeInt = Field(..., description="Quantity")
    location: Optional[ShortStr] = Field(None)


class InventoryUpdate(BaseModel):
    """Partial inventory update; absent fields are left untouched."""
    product_id: Optional[PositiveId] = None
    batch_number: Optional[NameStr] = None
    expiry_date: Optional[date] = None
    quantity: Optional[NonNegativeInt] = None
    location: Optional[ShortStr] = None
