"""
Module-switching application controller.

Holds the state a point-of-sale front end needs (active module, the row being
edited, loaded rows, the open form, the cart and transient banners) and talks
to the API through ApiClient. Rendering is left to the caller.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from .api import ApiClient, ApiError
from .cart import Cart, CartResult

logger = logging.getLogger(__name__)

# module name -> resource whose rows the module shows
MODULES: Dict[str, str] = {
    "products": "products",
    "inventory": "inventory",
    "customers": "customers",
    "manufacturers": "manufacturers",
    "active-ingredients": "active-ingredients",
    "suppliers": "suppliers",
    "purchase-orders": "purchase-orders",
    "users": "users",
    # the POS screen searches the product catalogue
    "sales": "products",
}

MIN_SEARCH_LENGTH = 2


@dataclass(frozen=True)
class Banner:
    level: str
    text: str


class AppController:
    """State and actions behind the pharmacy front end."""

    def __init__(self, client: Optional[ApiClient] = None) -> None:
        self.client = client or ApiClient()
        self.active_module: Optional[str] = None
        self.edit_target: Optional[Union[int, str]] = None
        self.form: Optional[Dict[str, Any]] = None
        self.rows: Dict[str, List[Dict[str, Any]]] = {}
        self.cart = Cart()
        self.banners: List[Banner] = []
        self.last_error: Optional[str] = None
        # held for the duration of a checkout request; UI threads share one controller
        self._checkout_lock = threading.Lock()

    # -- banners --------------------------------------------------------

    def _notify(self, level: str, text: str) -> None:
        if level == "error":
            logger.error(text)
            self.last_error = text
        else:
            logger.info(text)
        self.banners.append(Banner(level, text))

    def _report(self, result: CartResult) -> bool:
        self._notify("success" if result.ok else "error", result.message)
        return result.ok

    def pop_banners(self) -> List[Banner]:
        """Return and forget pending banners."""
        banners, self.banners = self.banners, []
        return banners

    # -- modules --------------------------------------------------------

    @property
    def resource(self) -> str:
        if self.active_module is None:
            raise RuntimeError("No module is active.")
        return MODULES[self.active_module]

    # PUBLIC_INTERFACE
    def show_module(self, name: str) -> bool:
        """Activate a module and load its rows; entering sales starts a fresh cart."""
        if name not in MODULES:
            raise ValueError(f"Unknown module: {name}")
        self.active_module = name
        self.close_form()
        if name == "sales":
            self.cart = Cart()
        return self.load()

    def rows_for(self, resource: str) -> List[Dict[str, Any]]:
        return self.rows.get(resource, [])

    # PUBLIC_INTERFACE
    def load(self, resource: Optional[str] = None) -> bool:
        """Fetch rows for a resource (default: the active module's); failures keep the previous rows."""
        resource = resource or self.resource
        try:
            rows = self.client.list(resource)
        except ApiError as exc:
            self._notify("error", exc.message or f"Failed to load {resource}.")
            return False
        self.rows[resource] = rows
        return True

    # -- forms ----------------------------------------------------------

    def open_form(self) -> None:
        """Open an empty form for a new record."""
        self.edit_target = None
        self.form = {}

    def close_form(self) -> None:
        self.edit_target = None
        self.form = None

    # PUBLIC_INTERFACE
    def edit(self, row_id: Union[int, str]) -> bool:
        """Pre-fill the form from the current server row."""
        try:
            row = self.client.get(self.resource, row_id)
        except ApiError as exc:
            self._notify("error", exc.message)
            return False
        self.edit_target = row_id
        self.form = dict(row)
        return True

    # PUBLIC_INTERFACE
    def submit_form(self, values: Mapping[str, Any]) -> bool:
        """
        Create (no edit target) or update (edit target set) from form values.

        On success the form closes and the module reloads; on failure the form
        stays open with the submitted values so they can be corrected.
        """
        self.form = dict(values)
        try:
            if self.edit_target is not None:
                response = self.client.update(self.resource, self.edit_target, self.form)
            else:
                response = self.client.create(self.resource, self.form)
        except ApiError as exc:
            self._notify("error", exc.message)
            return False
        self._notify("success", (response or {}).get("message", "Saved."))
        self.close_form()
        self.load()
        return True

    # PUBLIC_INTERFACE
    def delete(self, row_id: Union[int, str]) -> bool:
        try:
            response = self.client.delete(self.resource, row_id)
        except ApiError as exc:
            self._notify("error", exc.message)
            return False
        self._notify("success", (response or {}).get("message", "Deleted."))
        self.load()
        return True

    # -- point of sale --------------------------------------------------

    # PUBLIC_INTERFACE
    def search_products(self, query: str) -> List[Dict[str, Any]]:
        """Case-insensitive name filter over the loaded product list."""
        needle = query.strip().lower()
        if len(needle) < MIN_SEARCH_LENGTH:
            return []
        return [
            p for p in self.rows_for("products")
            if needle in str(p.get("product_name") or "").lower()
        ]

    def _find_product(self, product_id: int) -> Optional[Dict[str, Any]]:
        return next(
            (p for p in self.rows_for("products") if p.get("product_id") == product_id), None
        )

    # PUBLIC_INTERFACE
    def add_to_cart(self, product: Union[int, Mapping[str, Any]]) -> bool:
        """Add one unit of a product, given as a loaded product id or a product row."""
        if not isinstance(product, Mapping):
            found = self._find_product(product)
            if found is None:
                self._notify("error", "Product not found.")
                return False
            product = found
        return self._report(self.cart.add(product))

    def remove_from_cart(self, product_id: int) -> bool:
        return self._report(self.cart.remove(product_id))

    def update_cart_quantity(self, product_id: int, quantity: int) -> bool:
        return self._report(self.cart.set_quantity(product_id, quantity))

    # PUBLIC_INTERFACE
    def process_sale(self, customer_name: str = "", customer_phone: str = "") -> Optional[Dict[str, Any]]:
        """
        Check out the cart.

        The cart is cleared and inventory reloaded only after the server
        confirmed the sale; on any failure the cart is left as it was.
        Returns:
            The checkout response, or None when nothing was recorded.
        """
        if self.cart.is_empty:
            self._notify("error", "Cart is empty. Please add products to process a sale.")
            return None
        if not self._checkout_lock.acquire(blocking=False):
            self._notify("error", "A sale is already being processed.")
            return None

        try:
            response = self.client.checkout(self.cart.to_payload(customer_name, customer_phone))
        except ApiError as exc:
            self._notify("error", exc.message or "Failed to process sale.")
            return None
        finally:
            self._checkout_lock.release()

        self._notify("success", f"{response.get('message')} Sale ID: {response.get('sale_id')}")
        self.cart.clear()
        self.load("inventory")
        return response
