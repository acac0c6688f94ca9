from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from pharmacy_api.core.deps import get_session
from pharmacy_api.schemas.sales import CheckoutRequest, CheckoutResponse
from pharmacy_api.services.sales import SalesService

router = APIRouter(prefix="/sales", tags=["Sales"])


# PUBLIC_INTERFACE
@router.post(
    "/checkout",
    response_model=CheckoutResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Process a point-of-sale checkout",
    description=(
        "Resolve or create the customer and record one sale for the submitted cart, "
        "in a single transaction. Product stock levels are not changed."
    ),
)
async def checkout(
    payload: CheckoutRequest,
    session: AsyncSession = Depends(get_session),
) -> CheckoutResponse:
    result = await SalesService(session).checkout(payload)
    return CheckoutResponse(
        message="Sale processed successfully.",
        id=result.sale_id,
        sale_id=result.sale_id,
        customer_id=result.customer_id,
        total_amount=float(result.total_amount),
    )
