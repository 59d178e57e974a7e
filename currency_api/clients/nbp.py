"""HTTP client for the NBP (Narodowy Bank Polski) exchange rates API."""

from __future__ import annotations

from typing import Any, Optional

import httpx
from loguru import logger as default_logger

from currency_api.core.config import settings


class NbpClient:
    """Fetches buy/sell (table C) quotes for a single currency."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        base_url: Optional[str] = None,
        rates_date: Optional[str] = None,
        logger: Any = None,
    ):
        self._http = http_client
        self._base_url = (base_url or settings.NBP_API_BASE_URL).rstrip("/")
        self._rates_date = rates_date or settings.NBP_RATES_DATE
        self._logger = logger or default_logger.bind(component="NbpClient")

    def rate_table_url(self, currency: str) -> str:
        return f"{self._base_url}/{currency.lower()}/{self._rates_date}/"

    async def get_rate_table(self, currency: str) -> Any:
        """Return the decoded JSON body for ``currency``.

        Raises ``httpx.HTTPError`` on transport failures and non-2xx answers,
        and ``ValueError`` when the body is not JSON.
        """
        response = await self._http.get(self.rate_table_url(currency), params={"format": "json"})
        response.raise_for_status()
        payload = response.json()
        self._logger.bind(currency=currency.upper(), payload=payload).debug("nbp_rate_table_received")
        return payload
