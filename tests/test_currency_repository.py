"""Repository tests against an in-memory SQLite database."""

from __future__ import annotations

import pytest
from sqlalchemy import func, select

from currency_api.models import Currency
from currency_api.repositories.currency import SqlAlchemyCurrencyRepository
from currency_api.schemas.page import Order, PageOptions
from currency_api.services.currency import CurrencyService


async def _seed(repository: SqlAlchemyCurrencyRepository) -> None:
    await repository.upsert_exchange_rate("PLN", 1.0, True)
    await repository.upsert_exchange_rate("EUR", 0.2342, False)
    await repository.upsert_exchange_rate("USD", 0.2747, False)


@pytest.mark.anyio
async def test_upsert_twice_keeps_single_row_with_latest_rate(db_session):
    repository = SqlAlchemyCurrencyRepository(db_session)

    await repository.upsert_exchange_rate("EUR", 4.25, True)
    await repository.upsert_exchange_rate("EUR", 4.30, True)

    count = (
        await db_session.execute(select(func.count()).select_from(Currency).where(Currency.name == "EUR"))
    ).scalar_one()
    currency = await repository.find_one(name="EUR")
    assert count == 1
    assert currency.current_exchange_rate == 4.30


@pytest.mark.anyio
async def test_upsert_conflict_only_touches_rate(db_session):
    repository = SqlAlchemyCurrencyRepository(db_session)
    await repository.upsert_exchange_rate("PLN", 1.0, True)
    original = await repository.find_one(name="PLN")
    original_uuid = original.uuid

    await repository.upsert_exchange_rate("PLN", 1.5, False)

    currency = await repository.find_one(name="PLN")
    assert currency.current_exchange_rate == 1.5
    assert currency.base is True
    assert currency.uuid == original_uuid


@pytest.mark.anyio
async def test_find_one_by_name_and_by_uuid(db_session):
    repository = SqlAlchemyCurrencyRepository(db_session)
    await _seed(repository)

    eur = await repository.find_one(name="EUR")
    assert eur is not None and eur.name == "EUR"

    by_uuid = await repository.find_one(uuid=eur.uuid)
    assert by_uuid.name == "EUR"


@pytest.mark.anyio
async def test_find_one_matches_either_criterion(db_session):
    repository = SqlAlchemyCurrencyRepository(db_session)
    await _seed(repository)
    usd = await repository.find_one(name="USD")

    # uuid of USD OR name EUR: both rows match, the earlier insert wins
    currency = await repository.find_one(uuid=usd.uuid, name="EUR")

    assert currency.name == "EUR"


@pytest.mark.anyio
async def test_find_one_on_empty_store_returns_none(db_session):
    repository = SqlAlchemyCurrencyRepository(db_session)

    assert await repository.find_one(name="EUR") is None
    assert await repository.find_one() is None


@pytest.mark.anyio
async def test_find_one_without_criteria_returns_a_row(db_session):
    repository = SqlAlchemyCurrencyRepository(db_session)
    await _seed(repository)

    currency = await repository.find_one()

    assert currency is not None


@pytest.mark.anyio
async def test_get_many_and_count_slices_in_insertion_order(db_session):
    repository = SqlAlchemyCurrencyRepository(db_session)
    await _seed(repository)

    rows, total = await repository.get_many_and_count(skip=1, take=1)
    assert total == 3
    assert [row.name for row in rows] == ["EUR"]

    rows, _ = await repository.get_many_and_count(skip=0, take=2, order=Order.DESC)
    assert [row.name for row in rows] == ["USD", "EUR"]


@pytest.mark.anyio
@pytest.mark.parametrize("page,take", [(1, 1), (1, 2), (2, 2), (1, 50), (4, 1)])
async def test_service_pages_never_exceed_take(db_session, page, take):
    repository = SqlAlchemyCurrencyRepository(db_session)
    await _seed(repository)
    service = CurrencyService(repository, nbp_client=None)

    result = await service.list_currencies(PageOptions(page=page, take=take))

    assert len(result.data) <= take
    assert result.meta.item_count >= len(result.data)
    assert result.meta.item_count == 3


@pytest.mark.anyio
async def test_rate_upsert_leaves_timestamps_alone(db_session):
    repository = SqlAlchemyCurrencyRepository(db_session)
    await repository.upsert_exchange_rate("EUR", 4.25, False)
    before = await repository.find_one(name="EUR")
    created_at, updated_at = before.created_at, before.updated_at

    await repository.upsert_exchange_rate("EUR", 4.30, False)

    after = await repository.find_one(name="EUR")
    assert after.current_exchange_rate == 4.30
    assert (after.created_at, after.updated_at) == (created_at, updated_at)
    assert Currency.__table__.c.updated_at.onupdate is None
