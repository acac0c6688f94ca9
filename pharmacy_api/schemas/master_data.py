from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from .common import Money, NameStr, NonNegativeInt, OptionalEmail, PhoneStr, PositiveId, ShortStr, TrimmedStr


class ManufacturerRead(BaseModel):
    """Manufacturer read model."""
    manufacturer_id: int = Field(..., description="Manufacturer ID")
    manufacturer_name: str = Field(..., description="Manufacturer name")
    contact_person: Optional[str] = Field(None)
    phone: Optional[str] = Field(None)
    email: Optional[str] = Field(None)

    class Config:
        from_attributes = True


class ManufacturerCreate(BaseModel):
    """Create manufacturer payload."""
    manufacturer_name: NameStr = Field(..., description="Manufacturer name")
    contact_person: Optional[ShortStr] = Field(None)
    phone: Optional[PhoneStr] = Field(None)
    email: OptionalEmail = Field(None)


class ManufacturerUpdate(BaseModel):
    """Partial manufacturer update; absent fields are left untouched."""
    manufacturer_name: Optional[NameStr] = None
    contact_person: Optional[ShortStr] = None
    phone: Optional[PhoneStr] = None
    email: OptionalEmail = None


class ActiveIngredientRead(BaseModel):
    """Active ingredient read model."""
    ingredient_id: int = Field(..., description="Ingredient ID")
    ingredient_name: str = Field(..., description="Ingredient name")
    description: Optional[str] = Field(None)

    class Config:
        from_attributes = True


class ActiveIngredientCreate(BaseModel):
    """Create active ingredient payload."""
    ingredient_name: NameStr = Field(..., description="Ingredient name")
    description: Optional[TrimmedStr] = Field(None)


class ActiveIngredientUpdate(BaseModel):
    ingredient_name: Optional[NameStr] = None
    description: Optional[TrimmedStr] = None


class ProductRead(BaseModel):
    """Product read model."""
    product_id: int = Field(..., description="Product ID")
    product_name: str = Field(..., description="Product name")
    manufacturer_id: Optional[int] = Field(None)
    price: Optional[float] = Field(None)
    description: Optional[str] = Field(None)
    active_ingredient_id: Optional[int] = Field(None)
    stock_quantity: Optional[int] = Field(None)

    class Config:
        from_attributes = True


class ProductCreate(BaseModel):
    """Create product payload. Foreign keys are left to the database to enforce."""
    product_name: NameStr = Field(..., description="Product name")
    manufacturer_id: PositiveId = Field(..., description="Manufacturer id")
    price: Money = Field(..., description="Unit price")
    description: Optional[TrimmedStr] = Field(None)
    active_ingredient_id: PositiveId = Field(..., description="Active ingredient id")
    stock_quantity: NonNegativeInt = Field(..., description="Units in stock")


class ProductUpdate(BaseModel):
    product_name: Optional[NameStr] = None
    manufacturer_id: Optional[PositiveId] = None
    price: Optional[Money] = None
    description: Optional[TrimmedStr] = None
    active_ingredient_id: Optional[PositiveId] = None
    stock_quantity: Optional[NonNegativeInt] = None
