from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from .common import (
    MAX_INT,
    MAX_MONEY,
    LabelStr,
    Money,
    NameStr,
    OptionalEmail,
    PhoneStr,
    PositiveId,
    ShortStr,
    TrimmedStr,
)


class CustomerRead(BaseModel):
    """Customer read model."""
    customer_id: int = Field(..., description="Customer ID")
    customer_name: str = Field(..., description="Customer name")
    phone: Optional[str] = Field(None)
    email: Optional[str] = Field(None)
    address: Optional[str] = Field(None)

    class Config:
        from_attributes = True


class CustomerCreate(BaseModel):
    """Create customer payload."""
    customer_name: NameStr = Field(..., description="Customer name")
    phone: Optional[PhoneStr] = Field(None)
    email: OptionalEmail = Field(None)
    address: Optional[TrimmedStr] = Field(None)


class CustomerUpdate(BaseModel):
    customer_name: Optional[NameStr] = None
    phone: Optional[PhoneStr] = None
    email: OptionalEmail = None
    address: Optional[TrimmedStr] = None


class SaleRead(BaseModel):
    """Sale header read model."""
    sale_id: int = Field(..., description="Sale ID")
    customer_id: int = Field(..., description="Customer")
    sale_date: date = Field(..., description="Sale date")
    total_amount: Optional[float] = Field(None)
    status: Optional[str] = Field(None)

    class Config:
        from_attributes = True


class SaleCreate(BaseModel):
    """Create sale header payload."""
    customer_id: PositiveId = Field(..., description="Customer id")
    sale_date: date = Field(..., description="Sale date (YYYY-MM-DD)")
    total_amount: Money = Field(..., description="Sale total")
    status: LabelStr = Field(..., description="Status label")


class SaleUpdate(BaseModel):
    customer_id: Optional[PositiveId] = None
    sale_date: Optional[date] = None
    total_amount: Optional[Money] = None
    status: Optional[LabelStr] = None


class CheckoutItem(BaseModel):
    """One cart line submitted at checkout."""
    product_id: PositiveId = Field(..., description="Product id")
    quantity: int = Field(..., ge=1, le=MAX_INT, description="Units sold")
    price_at_sale: Money = Field(..., description="Unit price recorded at the time of sale")


class CheckoutRequest(BaseModel):
    """Point-of-sale checkout: a whole cart plus free-text customer details."""
    customer_name: Optional[ShortStr] = Field(None, description="Customer name (free text)")
    customer_phone: Optional[PhoneStr] = Field(None, description="Customer phone (free text)")
    items: List[CheckoutItem] = Field(..., min_length=1, description="Cart lines")

    @field_validator("items")
    @classmethod
    def _total_fits_amount_column(cls, items: List[CheckoutItem]) -> List[CheckoutItem]:
        total = sum((item.price_at_sale * item.quantity for item in items), Decimal("0"))
        if total > MAX_MONEY:
            raise ValueError(f"cart total exceeds {MAX_MONEY}")
        return items


class CheckoutResponse(BaseModel):
    """Result of a processed checkout."""
    message: str
    id: int
    sale_id: int
    customer_id: int
    total_amount: float
