"""
Resource registry: one descriptor per pharmacy table.

The API module mounts a router for every entry of RESOURCES under /api/v1.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pharmacy_api.api.crud import ResourceDescriptor
from pharmacy_api.core.security import get_password_hash
from pharmacy_api.db.models import (
    ActiveIngredient,
    Customer,
    InventoryItem,
    Manufacturer,
    Product,
    PurchaseOrder,
    Sale,
    Supplier,
    User,
)
from pharmacy_api.schemas.inventory import InventoryCreate, InventoryRead, InventoryUpdate
from pharmacy_api.schemas.master_data import (
    ActiveIngredientCreate,
    ActiveIngredientRead,
    ActiveIngredientUpdate,
    ManufacturerCreate,
    ManufacturerRead,
    ManufacturerUpdate,
    ProductCreate,
    ProductRead,
    ProductUpdate,
)
from pharmacy_api.schemas.procurement import (
    PurchaseOrderCreate,
    PurchaseOrderRead,
    PurchaseOrderUpdate,
    SupplierCreate,
    SupplierRead,
    SupplierUpdate,
)
from pharmacy_api.schemas.sales import (
    CustomerCreate,
    CustomerRead,
    CustomerUpdate,
    SaleCreate,
    SaleRead,
    SaleUpdate,
)
from pharmacy_api.schemas.users import UserCreate, UserRead, UserUpdate


def hash_user_password(values: Dict[str, Any]) -> Dict[str, Any]:
    """Replace a plain-text user_pass with its bcrypt hash."""
    if values.get("user_pass") is None:
        return values
    prepared = dict(values)
    prepared["user_pass"] = get_password_hash(prepared["user_pass"])
    return prepared


USERS = ResourceDescriptor(
    path="/users",
    tag="Users",
    label="User",
    model=User,
    read_schema=UserRead,
    create_schema=UserCreate,
    update_schema=UserUpdate,
    id_type=str,
    prepare=hash_user_password,
    conflict_message="User ID already exists.",
)

MANUFACTURERS = ResourceDescriptor(
    path="/manufacturers",
    tag="Master Data",
    label="Manufacturer",
    model=Manufacturer,
    read_schema=ManufacturerRead,
    create_schema=ManufacturerCreate,
    update_schema=ManufacturerUpdate,
)

ACTIVE_INGREDIENTS = ResourceDescriptor(
    path="/active-ingredients",
    tag="Master Data",
    label="Active Ingredient",
    model=ActiveIngredient,
    read_schema=ActiveIngredientRead,
    create_schema=ActiveIngredientCreate,
    update_schema=ActiveIngredientUpdate,
)

PRODUCTS = ResourceDescriptor(
    path="/products",
    tag="Master Data",
    label="Product",
    model=Product,
    read_schema=ProductRead,
    create_schema=ProductCreate,
    update_schema=ProductUpdate,
)

INVENTORY = ResourceDescriptor(
    path="/inventory",
    tag="Inventory",
    label="Inventory item",
    id_label="Inventory",
    model=InventoryItem,
    read_schema=InventoryRead,
    create_schema=InventoryCreate,
    update_schema=InventoryUpdate,
)

SUPPLIERS = ResourceDescriptor(
    path="/suppliers",
    tag="Procurement",
    label="Supplier",
    model=Supplier,
    read_schema=SupplierRead,
    create_schema=SupplierCreate,
    update_schema=SupplierUpdate,
)

PURCHASE_ORDERS = ResourceDescriptor(
    path="/purchase-orders",
    tag="Procurement",
    label="Purchase Order",
    model=PurchaseOrder,
    read_schema=PurchaseOrderRead,
    create_schema=PurchaseOrderCreate,
    update_schema=PurchaseOrderUpdate,
)

CUSTOMERS = ResourceDescriptor(
    path="/customers",
    tag="Sales",
    label="Customer",
    model=Customer,
    read_schema=CustomerRead,
    create_schema=CustomerCreate,
    update_schema=CustomerUpdate,
)

SALES = ResourceDescriptor(
    path="/sales",
    tag="Sales",
    label="Sale",
    model=Sale,
    read_schema=SaleRead,
    create_schema=SaleCreate,
    update_schema=SaleUpdate,
)

RESOURCES: List[ResourceDescriptor] = [
    USERS,
    MANUFACTURERS,
    ACTIVE_INGREDIENTS,
    PRODUCTS,
    INVENTORY,
    SUPPLIERS,
    PURCHASE_ORDERS,
    CUSTOMERS,
    SALES,
]
