"""Currency catalogue and exchange rate orchestration."""

from __future__ import annotations

import asyncio
from typing import Any, List, Optional
from uuid import UUID

from loguru import logger as default_logger

from currency_api.clients.nbp import NbpClient
from currency_api.core.exceptions import ForeignExchangeRatesNotFoundError
from currency_api.models.currency import Currency
from currency_api.repositories.currency import CurrencyRepository
from currency_api.schemas.currency import CurrenciesPage, CurrencyOut, ExchangeRateOut
from currency_api.schemas.nbp import NbpRate, NbpRateTable
from currency_api.schemas.page import PageMeta, PageOptions

# Currencies refreshed from the NBP API, in the order they are reported.
LIVE_RATE_CURRENCIES = ("EUR", "USD")


def mid_rate(rate: NbpRate) -> float:
    """Invert the bid/ask mean.

    NBP quotes PLN per unit of foreign currency; stored rates are foreign
    currency per PLN.
    """
    return 1 / ((rate.bid + rate.ask) / 2)


class CurrencyService:
    def __init__(
        self,
        repository: CurrencyRepository,
        nbp_client: NbpClient,
        *,
        logger: Any = None,
    ):
        self._repository = repository
        self._nbp_client = nbp_client
        self._logger = logger or default_logger.bind(component="CurrencyService")

    async def list_currencies(self, page_options: PageOptions) -> CurrenciesPage:
        currencies, count = await self._repository.get_many_and_count(
            skip=page_options.skip,
            take=page_options.take,
            order=page_options.order,
        )
        return CurrenciesPage(
            data=[CurrencyOut.model_validate(currency) for currency in currencies],
            meta=PageMeta.build(page_options, item_count=count),
        )

    async def find_currency(
        self, uuid: Optional[UUID] = None, name: Optional[str] = None
    ) -> Optional[Currency]:
        """Look a currency up by uuid or name.

        Calling it with neither criterion returns whichever row comes first;
        callers should always pass at least one.
        """
        return await self._repository.find_one(uuid=uuid, name=name)

    async def upsert_exchange_rate(self, name: str, current_exchange_rate: float, base: bool) -> None:
        await self._repository.upsert_exchange_rate(name, current_exchange_rate, base)

    async def fetch_live_exchange_rates(self) -> List[ExchangeRateOut]:
        """Fetch EUR and USD quotes concurrently and reduce each to a mid-rate.

        Any failure, in either request or in the payloads, is reported as
        ``ForeignExchangeRatesNotFoundError``; there is no partial result.
        """
        try:
            tables = await asyncio.gather(
                *(self._fetch_rate_table(code) for code in LIVE_RATE_CURRENCIES)
            )
            return [
                ExchangeRateOut(name=table.code, current_exchange_rate=mid_rate(table.rates[0]))
                for table in tables
            ]
        except Exception as exc:
            self._logger.exception("Error fetching foreign exchange rates")
            raise ForeignExchangeRatesNotFoundError(exc) from exc

    async def refresh_exchange_rates(self) -> List[ExchangeRateOut]:
        """Fetch live rates and store each of them as a non-base currency."""
        rates = await self.fetch_live_exchange_rates()
        for rate in rates:
            await self.upsert_exchange_rate(rate.name, rate.current_exchange_rate, False)
        self._logger.bind(currencies=[rate.name for rate in rates]).info("exchange_rates_refreshed")
        return rates

    async def _fetch_rate_table(self, currency: str) -> NbpRateTable:
        payload = await self._nbp_client.get_rate_table(currency)
        table = NbpRateTable.model_validate(payload)
        if not table.rates:
            raise ValueError(f"Invalid response structure from exchange rates API for {currency}")
        return table
