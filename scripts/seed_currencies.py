"""
Script to create the currency table and seed the base currency rows.
Rates of existing rows are overwritten with the seed values.

Usage:
    python -m scripts.seed_currencies
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path to import currency_api modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from currency_api.core.db import SessionLocal, engine
from currency_api.models import Base
from currency_api.repositories.currency import SqlAlchemyCurrencyRepository

# (name, current_exchange_rate, base); rates are units of currency per 1 PLN
SEED_CURRENCIES = [
    ("PLN", 1.0, True),
    ("EUR", 0.2342, False),
    ("USD", 0.2747, False),
]


async def seed_currencies() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with SessionLocal() as session:
        repository = SqlAlchemyCurrencyRepository(session)
        for name, rate, base in SEED_CURRENCIES:
            await repository.upsert_exchange_rate(name, rate, base)
            print(f"Seeded {name} (rate={rate}, base={base})")

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed_currencies())
