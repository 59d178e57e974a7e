from unittest.mock import MagicMock

import httpx
import pytest

from currency_api.clients.nbp import NbpClient
from currency_api.core.deps import get_currency_service


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.anyio
async def test_requests_table_c_for_pinned_date():
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, json={"code": "EUR", "rates": [{"bid": 4.24, "ask": 4.30}]})

    async with _client(handler) as http_client:
        payload = await NbpClient(http_client).get_rate_table("EUR")

    assert seen == ["https://api.nbp.pl/api/exchangerates/rates/c/eur/2024-07-26/?format=json"]
    assert payload["code"] == "EUR"


@pytest.mark.anyio
async def test_base_url_and_date_can_be_overridden():
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, json={})

    async with _client(handler) as http_client:
        client = NbpClient(http_client, base_url="http://nbp.local/rates/c/", rates_date="2024-01-02")
        await client.get_rate_table("usd")

    assert seen == ["http://nbp.local/rates/c/usd/2024-01-02/?format=json"]


@pytest.mark.anyio
async def test_error_status_raises_http_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, text="404 NotFound - Not Found - Brak danych")

    async with _client(handler) as http_client:
        with pytest.raises(httpx.HTTPStatusError):
            await NbpClient(http_client).get_rate_table("EUR")


@pytest.mark.anyio
async def test_non_json_body_raises_value_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>maintenance</html>")

    async with _client(handler) as http_client:
        with pytest.raises(ValueError):
            await NbpClient(http_client).get_rate_table("EUR")


@pytest.mark.anyio
async def test_payload_is_logged_through_injected_logger():
    body = {"code": "USD", "rates": [{"bid": 3.60, "ask": 3.68}]}

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=body)

    logger = MagicMock()
    async with _client(handler) as http_client:
        await NbpClient(http_client, logger=logger).get_rate_table("usd")

    logger.bind.assert_called_once_with(currency="USD", payload=body)
    logger.bind.return_value.debug.assert_called_once_with("nbp_rate_table_received")


@pytest.mark.anyio
async def test_service_and_client_share_one_logger():
    service = await get_currency_service(session=MagicMock(), http_client=MagicMock())

    assert service._nbp_client._logger is service._logger
