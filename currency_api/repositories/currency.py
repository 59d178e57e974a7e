"""Storage access for currency rows."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.dialects.mysql import insert as mysql_insert
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from currency_api.models.currency import Currency
from currency_api.schemas.page import Order


class CurrencyRepository(ABC):
    """Operations the currency service needs from the store."""

    @abstractmethod
    async def get_many_and_count(
        self, skip: int, take: int, order: Order = Order.ASC
    ) -> tuple[Sequence[Currency], int]:
        """Return one slice of currencies in insertion order plus the total row count."""

    @abstractmethod
    async def find_one(
        self, uuid: Optional[UUID] = None, name: Optional[str] = None
    ) -> Optional[Currency]:
        """Return the first row whose uuid or name matches, if any."""

    @abstractmethod
    async def upsert_exchange_rate(self, name: str, current_exchange_rate: float, base: bool) -> None:
        """Insert a currency or, when the name exists, overwrite its rate only."""


class SqlAlchemyCurrencyRepository(CurrencyRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_many_and_count(
        self, skip: int, take: int, order: Order = Order.ASC
    ) -> tuple[Sequence[Currency], int]:
        total = (
            await self._session.execute(select(func.count()).select_from(Currency))
        ).scalar_one()

        ordering = Currency.id.desc() if order == Order.DESC else Currency.id.asc()
        stmt = (
            select(Currency)
            .order_by(ordering)
            .offset(skip)
            .limit(take)
            .execution_options(populate_existing=True)
        )
        rows = (await self._session.execute(stmt)).scalars().all()
        return rows, total

    async def find_one(
        self, uuid: Optional[UUID] = None, name: Optional[str] = None
    ) -> Optional[Currency]:
        clauses = []
        if uuid:
            clauses.append(Currency.uuid == uuid)
        if name:
            clauses.append(Currency.name == name)

        # Without criteria this degrades to "first row of the table".
        stmt = select(Currency)
        if clauses:
            stmt = stmt.where(or_(*clauses))
        stmt = stmt.order_by(Currency.id).limit(1).execution_options(populate_existing=True)
        return (await self._session.execute(stmt)).scalars().first()

    async def upsert_exchange_rate(self, name: str, current_exchange_rate: float, base: bool) -> None:
        values = {"name": name, "current_exchange_rate": current_exchange_rate, "base": base}
        dialect = self._session.get_bind().dialect.name

        if dialect == "mysql":
            stmt = mysql_insert(Currency).values(**values)
            stmt = stmt.on_duplicate_key_update(
                current_exchange_rate=stmt.inserted.current_exchange_rate
            )
        else:
            insert = sqlite_insert if dialect == "sqlite" else pg_insert
            stmt = insert(Currency).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[Currency.name],
                set_={"current_exchange_rate": stmt.excluded.current_exchange_rate},
            )

        await self._session.execute(stmt)
        await self._session.commit()
