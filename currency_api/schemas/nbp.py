"""Payloads returned by the NBP exchange rates API (table C)."""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class NbpRate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    no: Optional[str] = None
    effective_date: Optional[date] = Field(default=None, alias="effectiveDate")
    bid: float
    ask: float


class NbpRateTable(BaseModel):
    table: Optional[str] = None
    currency: Optional[str] = None
    code: str
    rates: List[NbpRate]
