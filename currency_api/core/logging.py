"""Loguru setup for the API process and the scripts.

Everything ends up in one loguru sink: application code logs through loguru
directly, and records from stdlib loggers (uvicorn, SQLAlchemy, httpx) are
forwarded by ``InterceptHandler``. Each record carries the request id of the
HTTP request it was emitted under, or ``-`` outside a request.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from sys import stdout
from typing import Any

from loguru import logger

from currency_api.core.config import settings

request_id_ctx_var: ContextVar[str] = ContextVar("request_id", default="-")

# Third-party loggers that are noisy below WARNING.
QUIET_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine")


class InterceptHandler(logging.Handler):
    """Route stdlib ``logging`` records into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk out of the logging module so loguru reports the real caller.
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.bind(logger_name=record.name).opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _patch_record(record: dict[str, Any]) -> None:
    record["extra"].setdefault("request_id", request_id_ctx_var.get())


def setup_logging() -> None:
    """Install the loguru sink and forward stdlib logging into it."""

    logging.basicConfig(handlers=[InterceptHandler()], level=settings.LOG_LEVEL, force=True)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.remove()
    logger.configure(patcher=_patch_record)
    logger.add(
        stdout,
        level=settings.LOG_LEVEL,
        enqueue=True,
        backtrace=False,
        diagnose=False,
        serialize=settings.LOG_JSON,
    )
