from datetime import datetime
from uuid import UUID, uuid4
from typing import Optional

from sqlalchemy import Boolean, DateTime, Float, Integer, String, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from currency_api.models.base import Base


class Currency(Base):
    """ORM model for the ``currency`` table."""

    __tablename__ = "currency"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    uuid: Mapped[UUID] = mapped_column(Uuid, unique=True, nullable=False, default=uuid4)
    name: Mapped[str] = mapped_column(String(16), unique=True, nullable=False)
    current_exchange_rate: Mapped[float] = mapped_column(Float, nullable=False)
    base: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=text("CURRENT_TIMESTAMP")
    )
    # Set on insert only; the rate upsert writes current_exchange_rate and nothing else.
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime, server_default=text("CURRENT_TIMESTAMP")
    )
