"""
Fetch the NBP EUR/USD quotes and store the derived mid-rates.
Meant to be scheduled (cron) next to the API process.

Usage:
    python -m scripts.refresh_exchange_rates
"""

import asyncio
import sys
from pathlib import Path

from loguru import logger

# Add parent directory to path to import currency_api modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from currency_api.clients.nbp import NbpClient
from currency_api.core.db import SessionLocal, engine
from currency_api.core.exceptions import ForeignExchangeRatesNotFoundError
from currency_api.core.http import close_http_client, get_http_client
from currency_api.core.logging import setup_logging
from currency_api.repositories.currency import SqlAlchemyCurrencyRepository
from currency_api.services.currency import CurrencyService


async def refresh_exchange_rates() -> int:
    setup_logging()
    http_client = await get_http_client()
    try:
        async with SessionLocal() as session:
            job_logger = logger.bind(component="refresh_exchange_rates")
            service = CurrencyService(
                SqlAlchemyCurrencyRepository(session),
                NbpClient(http_client, logger=job_logger),
                logger=job_logger,
            )
            try:
                rates = await service.refresh_exchange_rates()
            except ForeignExchangeRatesNotFoundError:
                print("Exchange rates could not be refreshed, see the log for the cause")
                return 1
        for rate in rates:
            print(f"{rate.name}: {rate.current_exchange_rate:.6f}")
        return 0
    finally:
        await close_http_client()
        await engine.dispose()


if __name__ == "__main__":
    sys.exit(asyncio.run(refresh_exchange_rates()))
