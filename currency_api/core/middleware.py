"""Request context middleware: request ids and access logs."""

from __future__ import annotations

import time
import uuid

from fastapi import Request, Response
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

from currency_api.core.logging import request_id_ctx_var

# Probe endpoints are polled constantly; keep them out of the access log.
QUIET_PATHS = frozenset({"/api/healthz", "/api/readyz"})


class RequestContextLogMiddleware(BaseHTTPMiddleware):
    """Propagates ``X-Request-ID`` and logs one ``request_completed`` event per call."""

    async def dispatch(self, request: Request, call_next):  # type: ignore[override]
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        request.state.request_id = request_id
        token = request_id_ctx_var.set(request_id)
        start = time.perf_counter()
        response: Response | None = None
        try:
            response = await call_next(request)
            response.headers.setdefault("X-Request-ID", request_id)
            return response
        finally:
            if request.url.path not in QUIET_PATHS:
                logger.bind(
                    method=request.method,
                    path=request.url.path,
                    query=request.url.query or None,
                    client=request.client.host if request.client else None,
                    status=response.status_code if response else 500,
                    duration_ms=round((time.perf_counter() - start) * 1000, 2),
                ).info("request_completed")
            request_id_ctx_var.reset(token)
