"""Rate limiting for endpoints that call the NBP API, using SlowAPI."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

# Only routes decorated with ``@limiter.limit`` are throttled.
limiter = Limiter(key_func=get_remote_address)


async def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.bind(
        path=str(request.url.path),
        client=get_remote_address(request),
        limit=str(exc.detail),
    ).warning("rate_limit_exceeded")
    return JSONResponse(status_code=429, content={"detail": f"Too many requests: {exc.detail}"})


def init_rate_limiter(app: FastAPI) -> None:
    """Attach the limiter, its middleware and the 429 handler to ``app``."""

    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
