from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from currency_api.schemas.page import Page


class CurrencyOut(BaseModel):
    """Schema for currency records returned to clients."""

    model_config = ConfigDict(from_attributes=True)

    uuid: UUID
    name: str
    current_exchange_rate: float
    base: bool
    created_at: datetime
    updated_at: Optional[datetime] = None


class ExchangeRateOut(BaseModel):
    name: str
    current_exchange_rate: float


class ExchangeRateUpdate(BaseModel):
    current_exchange_rate: float = Field(gt=0)
    base: bool = False


CurrenciesPage = Page[CurrencyOut]
