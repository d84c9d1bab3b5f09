"""
Structured logging setup for the application.

Uses LOG_LEVEL from settings (storefront.core.config) and configures a JSON formatter
on the root logger. Intended to be called once during application startup.

Also provides RequestLoggingMiddleware, which writes one access line per HTTP request.

Usage:
    from storefront.core.logging import init_logging
    init_logging()
    log = logging.getLogger(__name__)
    log.info("service started", extra={"component": "api"})
"""

from __future__ import annotations

import json
import logging
import sys
import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from storefront.core.config import get_settings

__all__ = ["init_logging", "JsonFormatter", "RequestLoggingMiddleware"]

# Standard LogRecord attributes that are never copied from 'extra'
_RESERVED_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    }
)


class JsonFormatter(logging.Formatter):
    """Minimal JSON log formatter with stable keys."""

    default_time_format = "%Y-%m-%dT%H:%M:%S%z"

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 (shadow builtin)
        payload: Dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(
                self.default_time_format
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Include any custom attributes from 'extra'
        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS or key in payload:
                continue
            try:
                json.dumps(value)
                payload[key] = value
            except (TypeError, ValueError):
                payload[key] = str(value)

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False)


_configured: bool = False


def _to_log_level(level: str) -> int:
    mapping = {
        "CRITICAL": logging.CRITICAL,
        "ERROR": logging.ERROR,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "INFO": logging.INFO,
        "DEBUG": logging.DEBUG,
        "NOTSET": logging.NOTSET,
    }
    return mapping.get((level or "INFO").upper(), logging.INFO)


def init_logging(level: Optional[str] = None) -> None:
    """
    Initialize application logging with a JSON formatter.

    The level defaults to settings.log_level. Idempotent: safe to call multiple times.
    """
    global _configured
    if _configured:
        return

    resolved = _to_log_level(level if level is not None else get_settings().log_level)

    root = logging.getLogger()
    root.setLevel(resolved)

    # Remove existing handlers to avoid duplicate logs in dev/test
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setLevel(resolved)
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)

    _configured = True


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log method, path, status and duration for every HTTP request.
    """

    def __init__(self, app, logger_name: str = "storefront.access") -> None:
        super().__init__(app)
        self.log = logging.getLogger(logger_name)

    async def dispatch(self, request: Request, call_next) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        self.log.info(
            "%s %s %s",
            request.method,
            request.url.path,
            response.status_code,
            extra={
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response
