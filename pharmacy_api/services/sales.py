from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from pharmacy_api.db.models.sales import Customer, Sale
from pharmacy_api.repositories.sales import CustomerRepository, SaleRepository
from pharmacy_api.schemas.sales import CheckoutItem, CheckoutRequest
from pharmacy_api.services.base import BaseService

logger = logging.getLogger(__name__)

WALK_IN_CUSTOMER = "Walk-in customer"
COMPLETED_STATUS = "completed"
_CENT = Decimal("0.01")


@dataclass(frozen=True)
class CheckoutResult:
    sale_id: int
    customer_id: int
    total_amount: Decimal


# PUBLIC_INTERFACE
def cart_total(items: Iterable[CheckoutItem]) -> Decimal:
    """Sum of price_at_sale x quantity over all lines, rounded to cents."""
    total = sum((item.price_at_sale * item.quantity for item in items), Decimal("0"))
    return total.quantize(_CENT, rounding=ROUND_HALF_UP)


class SalesService(BaseService):
    """
    Point-of-sale checkout.

    Resolving the customer and inserting the sale happen in one transaction:
    either both rows are written or neither is. Product stock is not touched.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.customers = CustomerRepository(session)
        self.sales = SaleRepository(session)

    async def _resolve_customer(self, name: Optional[str], phone: Optional[str]) -> Customer:
        phone = phone or None
        name = name or None
        if phone:
            found = await self.customers.find_by_phone(phone)
            if found is not None:
                return found
        if name:
            found = await self.customers.find_by_name(name)
            if found is not None:
                return found
        return await self.customers.add_customer(name=name or WALK_IN_CUSTOMER, phone=phone)

    # PUBLIC_INTERFACE
    async def checkout(self, payload: CheckoutRequest, sale_date: Optional[date] = None) -> CheckoutResult:
        """
        Record a sale for the submitted cart.

        Parameters:
            payload: cart lines and free-text customer details
            sale_date: override for the sale date (defaults to today)
        Returns:
            CheckoutResult with the new sale id, the customer id and the total
        """
        total = cart_total(payload.items)
        try:
            customer = await self._resolve_customer(payload.customer_name, payload.customer_phone)
            sale = await self.sales.add_sale(
                Sale(
                    customer_id=customer.customer_id,
                    sale_date=sale_date or date.today(),
                    total_amount=total,
                    status=COMPLETED_STATUS,
                )
            )
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            logger.warning("Checkout rolled back (%d lines)", len(payload.items))
            raise

        logger.info(
            "Sale %s recorded for customer %s: %d lines, total %s",
            sale.sale_id,
            customer.customer_id,
            len(payload.items),
            total,
        )
        return CheckoutResult(sale_id=sale.sale_id, customer_id=customer.customer_id, total_amount=total)
