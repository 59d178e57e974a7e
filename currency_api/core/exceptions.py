"""Domain exceptions and their HTTP translation."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


class ForeignExchangeRatesNotFoundError(Exception):
    """Live exchange rates could not be fetched or understood.

    Raised for every failure of the upstream lookup (network, decoding,
    unexpected payload shape). The triggering exception is kept on
    ``cause`` and chained as ``__cause__``.
    """

    message = "Foreign exchange rates not found"

    def __init__(self, cause: BaseException | None = None):
        super().__init__(self.message)
        self.cause = cause


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain exceptions onto HTTP responses."""

    async def fx_rates_not_found_handler(request: Request, exc: ForeignExchangeRatesNotFoundError):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": exc.message},
        )

    app.add_exception_handler(ForeignExchangeRatesNotFoundError, fx_rates_not_found_handler)
