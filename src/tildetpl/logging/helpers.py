from __future__ import annotations

"""Small logging helpers to standardize tildetpl logger names, configuration and tracing.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Configuration for the base 'tildetpl' logger.
    - get_logger: Namespaced logger factory ('tildetpl.*').
    - trace: Debug tracing gated by TILDETPL_TRACE.

The JSON payload carries a fixed 'version' field resolved from
tildetpl.__version__ when the formatter is built, or 'unknown'.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

from tildetpl.constants import BASE_LOGGER_NAME, ENV_TRACE, ENV_VERSION


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'tildetpl.templates').
        - msg: Formatted message string.
        - version: tildetpl.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            # Lazy import: the package __init__ imports this module.
            from tildetpl import __version__ as _v
            return str(_v)
        except ImportError:
            return os.getenv(ENV_VERSION, 'unknown')

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec='milliseconds').replace('+00:00', 'Z')

        payload = {
            'ts': ts_str,
            'level': record.levelname,
            'module': record.name,
            'msg': record.getMessage(),
            'version': self._version,
        }

        ctx = getattr(record, 'context', None)
        if isinstance(ctx, dict) and ctx:
            payload['ctx'] = ctx

        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_base_logger(
    *,
    json_logs: bool = False,
    level: int = logging.INFO,
    stream: Optional[TextIO] = None,
    force: bool = False,
) -> logging.Logger:
    """Configure the base 'tildetpl' logger and return it.

    Without *force*, a logger that already has handlers only gets its level
    adjusted. With *force*, existing handlers are replaced so a new stream
    or format takes effect.
    """
    base = logging.getLogger(BASE_LOGGER_NAME)
    if base.handlers and not force:
        base.setLevel(level)
        return base

    base.handlers.clear()
    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'tildetpl'."""
    if not name or name == BASE_LOGGER_NAME:
        return logging.getLogger(BASE_LOGGER_NAME)
    if name.startswith(BASE_LOGGER_NAME + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{BASE_LOGGER_NAME}.{name}')


_trace_override: Optional[bool] = None


def set_trace_enabled(flag: Optional[bool]) -> None:
    """Force tracing on/off; None falls back to TILDETPL_TRACE."""
    global _trace_override
    _trace_override = flag


def is_trace_enabled() -> bool:
    if _trace_override is not None:
        return _trace_override
    return os.getenv(ENV_TRACE) == '1'


def trace(logger: logging.Logger, message: str, **ctx) -> None:
    """Emit a debug trace only when TILDETPL_TRACE=1."""
    if not is_trace_enabled():
        return
    if ctx:
        logger.debug('%s | ctx=%r', message, ctx)
    else:
        logger.debug('%s', message)
