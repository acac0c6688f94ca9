from __future__ import annotations

from typing import Annotated, Optional

from pydantic import BaseModel, Field, StringConstraints

from .common import DepartmentStr, LabelStr, NameStr

# Passwords are hashed as given; surrounding whitespace is significant.
Password = Annotated[str, StringConstraints(min_length=1, max_length=72)]


class UserRead(BaseModel):
    """User read model. The password hash is never part of it."""
    user_id: str = Field(..., description="User ID")
    user_department: Optional[str] = Field(None)
    user_type: Optional[str] = Field(None)
    user_status: Optional[str] = Field(None)

    class Config:
        from_attributes = True


class UserCreate(BaseModel):
    """Create user payload. Every field is required."""
    user_id: NameStr = Field(..., description="Login id (unique)")
    user_pass: Password = Field(..., description="Plain-text password; stored hashed")
    user_department: DepartmentStr = Field(..., description="Department")
    user_type: LabelStr = Field(..., description="User type")
    user_status: LabelStr = Field(..., description="Status label")


class UserUpdate(BaseModel):
    """Partial user update. The user_id itself cannot be changed."""
    user_pass: Optional[Password] = None
    user_department: Optional[DepartmentStr] = None
    user_type: Optional[LabelStr] = None
    user_status: Optional[LabelStr] = None
