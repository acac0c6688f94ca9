from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from .common import LabelStr, Money, NameStr, OptionalEmail, PhoneStr, PositiveId, ShortStr, TrimmedStr


class SupplierRead(BaseModel):
    """Supplier read model."""
    supplier_id: int = Field(..., description="Supplier ID")
    supplier_name: str = Field(..., description="Supplier name")
    contact_person: Optional[str] = Field(None)
    phone: Optional[str] = Field(None)
    email: Optional[str] = Field(None)
    address: Optional[str] = Field(None)

    class Config:
        from_attributes = True


class SupplierCreate(BaseModel):
    """Create supplier payload."""
    supplier_name: NameStr = Field(..., description="Supplier name")
    contact_person: Optional[ShortStr] = Field(None)
    phone: Optional[PhoneStr] = Field(None)
    email: OptionalEmail = Field(None)
    address: Optional[TrimmedStr] = Field(None)


class SupplierUpdate(BaseModel):
    supplier_name: Optional[NameStr] = None
    contact_person: Optional[ShortStr] = None
    phone: Optional[PhoneStr] = None
    email: OptionalEmail = None
    address: Optional[TrimmedStr] = None


class PurchaseOrderRead(BaseModel):
    """PO header read model."""
    po_id: int = Field(..., description="PO ID")
    supplier_id: int = Field(..., description="Supplier")
    order_date: date = Field(..., description="Order date")
    total_amount: Optional[float] = Field(None)
    status: Optional[str] = Field(None)

    class Config:
        from_attributes = True


class PurchaseOrderCreate(BaseModel):
    """
    Create PO header payload.

    `status` is an opaque string chosen by the client; it is not checked
    against a closed set.
    """
    supplier_id: PositiveId = Field(..., description="Supplier id")
    order_date: date = Field(..., description="Order date (YYYY-MM-DD)")
    total_amount: Money = Field(..., description="Order total")
    status: LabelStr = Field(..., description="Status label")


class PurchaseOrderUpdate(BaseModel):
    supplier_id: Optional[PositiveId] = None
    order_date: Optional[date] = None
    total_amount: Optional[Money] = None
    status: Optional[LabelStr] = None
