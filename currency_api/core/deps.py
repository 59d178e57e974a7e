import httpx
from fastapi import Depends
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from currency_api.clients.nbp import NbpClient
from currency_api.core.db import get_session
from currency_api.core.http import get_http_client
from currency_api.repositories.currency import SqlAlchemyCurrencyRepository
from currency_api.services.currency import CurrencyService


async def get_currency_service(
    session: AsyncSession = Depends(get_session),
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> CurrencyService:
    service_logger = logger.bind(component="CurrencyService")
    return CurrencyService(
        SqlAlchemyCurrencyRepository(session),
        NbpClient(http_client, logger=service_logger),
        logger=service_logger,
    )
