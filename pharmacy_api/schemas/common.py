from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, BeforeValidator, EmailStr, Field, StringConstraints

# Integer columns are 32-bit signed on every supported backend.
MAX_INT = 2_147_483_647

# Reusable field types. Validation happens here; output encoding is left to
# whoever renders the values.
TrimmedStr = Annotated[str, StringConstraints(strip_whitespace=True)]

# Bounded strings, sized to the VARCHAR columns they are stored in.
NameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
DepartmentStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
LabelStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]
ShortStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=255)]
PhoneStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=50)]

PositiveId = Annotated[int, Field(gt=0, le=MAX_INT)]
NonNegativeInt = Annotated[int, Field(ge=0, le=MAX_INT)]
Money = Annotated[Decimal, Field(ge=0, max_digits=10, decimal_places=2)]
MAX_MONEY = Decimal("99999999.99")


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


OptionalEmail = Annotated[Optional[EmailStr], BeforeValidator(_blank_to_none)]


class MessageResponse(BaseModel):
    """Standard message envelope for mutations and errors."""
    message: str = Field(..., description="Human readable message")
    id: Optional[Union[int, str]] = Field(default=None, description="Identifier of the created row")
    details: Optional[Any] = Field(default=None, description="Optional extra data (e.g., field errors)")
    error_id: Optional[str] = Field(
        default=None, description="Opaque identifier of a server-side error, for support lookups"
    )


# PUBLIC_INTERFACE
def message_body(message: str, **extra: Any) -> dict:
    """Serialize a MessageResponse, omitting unset optional keys."""
    return MessageResponse(message=message, **extra).model_dump(mode="json", exclude_none=True)
