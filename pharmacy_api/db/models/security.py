from __future__ import annotations

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from pharmacy_api.db.base import Base


class User(Base):
    """Application user. The primary key is chosen by the client."""
    __tablename__ = "tbl_crm_user"

    user_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    user_pass: Mapped[str] = mapped_column(String(255), nullable=False)
    user_department: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    user_type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    user_status: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
