"""Pagination request/response schemas shared by list endpoints."""

from __future__ import annotations

import math
from enum import Enum
from typing import Generic, List, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")

MAX_PAGE_SIZE = 50


class Order(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class PageOptions(BaseModel):
    """Page request expressed as a 1-based page number and a page size."""

    order: Order = Order.ASC
    page: int = Field(default=1, ge=1)
    take: int = Field(default=10, ge=1, le=MAX_PAGE_SIZE)

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.take


class PageMeta(BaseModel):
    page: int
    take: int
    item_count: int
    page_count: int
    has_previous_page: bool
    has_next_page: bool

    @classmethod
    def build(cls, options: PageOptions, item_count: int) -> "PageMeta":
        page_count = math.ceil(item_count / options.take)
        return cls(
            page=options.page,
            take=options.take,
            item_count=item_count,
            page_count=page_count,
            has_previous_page=options.page > 1,
            has_next_page=options.page < page_count,
        )


class Page(BaseModel, Generic[T]):
    data: List[T]
    meta: PageMeta
