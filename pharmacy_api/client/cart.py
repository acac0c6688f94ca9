from __future__ import annotations

from dataclasses import asdict, dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List, Mapping, Optional

_CENT = Decimal("0.01")


def _to_money(value: Any) -> Decimal:
    return Decimal(str(value if value is not None else 0)).quantize(_CENT, rounding=ROUND_HALF_UP)


def _to_stock(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    return int(value)


@dataclass
class CartLine:
    product_id: int
    name: str
    price: Decimal
    quantity: int = 1
    # None: stock unknown, no ceiling
    stock_quantity: Optional[int] = None

    @property
    def line_total(self) -> Decimal:
        return (self.price * self.quantity).quantize(_CENT, rounding=ROUND_HALF_UP)

    def allows(self, quantity: int) -> bool:
        return self.stock_quantity is None or quantity <= self.stock_quantity


@dataclass(frozen=True)
class CartResult:
    ok: bool
    message: str


@dataclass
class Cart:
    """
    Point-of-sale cart.

    Stock ceilings are the product's stock_quantity as it was when the line was
    added; the server does not re-check them at checkout.
    """

    lines: List[CartLine] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def total(self) -> Decimal:
        return sum((line.line_total for line in self.lines), Decimal("0.00")).quantize(_CENT)

    def find(self, product_id: int) -> Optional[CartLine]:
        return next((line for line in self.lines if line.product_id == product_id), None)

    # PUBLIC_INTERFACE
    def add(self, product: Mapping[str, Any]) -> CartResult:
        """
        Add one unit of a product row (as returned by the products endpoint).

        An existing line is incremented up to its stock ceiling; a new product is
        appended with quantity 1 unless it is out of stock.
        """
        product_id = int(product["product_id"])
        name = str(product.get("product_name") or product.get("name") or product_id)
        existing = self.find(product_id)
        if existing is not None:
            if not existing.allows(existing.quantity + 1):
                return CartResult(False, f"Cannot add more {existing.name}. Max stock reached.")
            existing.quantity += 1
            return CartResult(True, f"{existing.name} quantity increased in cart.")

        stock = _to_stock(product.get("stock_quantity"))
        if stock is not None and stock <= 0:
            return CartResult(False, f"{name} is out of stock.")
        self.lines.append(
            CartLine(
                product_id=product_id,
                name=name,
                price=_to_money(product.get("price")),
                quantity=1,
                stock_quantity=stock,
            )
        )
        return CartResult(True, f"{name} added to cart.")

    def remove(self, product_id: int) -> CartResult:
        line = self.find(product_id)
        if line is None:
            return CartResult(False, "Item is not in the cart.")
        self.lines.remove(line)
        return CartResult(True, "Item removed from cart.")

    def set_quantity(self, product_id: int, quantity: int) -> CartResult:
        """Set a line's quantity; zero or less removes it, above stock is refused."""
        line = self.find(product_id)
        if line is None:
            return CartResult(False, "Item is not in the cart.")
        if quantity <= 0:
            return self.remove(product_id)
        if not line.allows(quantity):
            return CartResult(
                False,
                f"Cannot set quantity to {quantity}. Max stock for {line.name} is {line.stock_quantity}.",
            )
        line.quantity = quantity
        return CartResult(True, f"Quantity updated for {line.name}.")

    def clear(self) -> None:
        self.lines.clear()

    # PUBLIC_INTERFACE
    def to_payload(self, customer_name: str = "", customer_phone: str = "") -> Dict[str, Any]:
        """Build the checkout request body."""
        return {
            "customer_name": customer_name.strip(),
            "customer_phone": customer_phone.strip(),
            "items": [
                {
                    "product_id": line.product_id,
                    "quantity": line.quantity,
                    "price_at_sale": float(line.price),
                }
                for line in self.lines
            ],
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lines": [
                {**asdict(line), "price": str(line.price)} for line in self.lines
            ]
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Cart":
        return cls(
            lines=[
                CartLine(
                    product_id=int(raw["product_id"]),
                    name=str(raw["name"]),
                    price=_to_money(raw["price"]),
                    quantity=int(raw["quantity"]),
                    stock_quantity=_to_stock(raw.get("stock_quantity")),
                )
                for raw in data.get("lines", [])
            ]
        )
