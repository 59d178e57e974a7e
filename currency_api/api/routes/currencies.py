from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from currency_api.core.config import settings
from currency_api.core.deps import get_currency_service
from currency_api.core.rate_limit import limiter
from currency_api.schemas.currency import (
    CurrenciesPage,
    CurrencyOut,
    ExchangeRateOut,
    ExchangeRateUpdate,
)
from currency_api.schemas.page import MAX_PAGE_SIZE, Order, PageOptions
from currency_api.services.currency import CurrencyService

router = APIRouter(prefix="/currencies", tags=["currencies"])


@router.get("", response_model=CurrenciesPage)
async def list_currencies(
    page: int = Query(1, ge=1),
    take: int = Query(10, ge=1, le=MAX_PAGE_SIZE),
    order: Order = Order.ASC,
    service: CurrencyService = Depends(get_currency_service),
) -> CurrenciesPage:
    return await service.list_currencies(PageOptions(page=page, take=take, order=order))


@router.get("/lookup", response_model=CurrencyOut)
async def lookup_currency(
    uuid: Optional[UUID] = None,
    name: Optional[str] = None,
    service: CurrencyService = Depends(get_currency_service),
):
    if uuid is None and not name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Either uuid or name is required",
        )
    currency = await service.find_currency(uuid=uuid, name=name)
    if currency is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Currency not found")
    return currency


@router.get("/exchange-rates/live", response_model=List[ExchangeRateOut])
async def live_exchange_rates(
    service: CurrencyService = Depends(get_currency_service),
) -> List[ExchangeRateOut]:
    return await service.fetch_live_exchange_rates()


@router.post("/exchange-rates/refresh", response_model=List[ExchangeRateOut])
@limiter.limit(settings.FX_REFRESH_RATE)
async def refresh_exchange_rates(
    request: Request,
    service: CurrencyService = Depends(get_currency_service),
) -> List[ExchangeRateOut]:
    return await service.refresh_exchange_rates()


@router.put("/{name}/exchange-rate", status_code=status.HTTP_204_NO_CONTENT)
async def upsert_exchange_rate(
    name: str,
    payload: ExchangeRateUpdate,
    service: CurrencyService = Depends(get_currency_service),
) -> Response:
    await service.upsert_exchange_rate(name.upper(), payload.current_exchange_rate, payload.base)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
