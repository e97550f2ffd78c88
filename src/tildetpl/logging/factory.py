from __future__ import annotations

import logging
from typing import Optional, TextIO, Union

from tildetpl.logging.helpers import get_logger, setup_base_logger


def coerce_level(level: Union[int, str, None], default: int = logging.INFO) -> int:
    """Accept numeric levels or names such as 'debug' / 'WARNING'."""
    if level is None or level == '':
        return default
    if isinstance(level, int):
        return level
    text = str(level).strip()
    if text.isdigit():
        return int(text)
    value = logging.getLevelName(text.upper())
    return value if isinstance(value, int) else default


class DefaultLoggerFactory:
    """Hands out 'tildetpl.*' loggers, configuring the base logger on first use."""

    def __init__(
        self,
        *,
        json_logs: bool = False,
        level: Union[int, str] = logging.INFO,
        stream: Optional[TextIO] = None,
    ) -> None:
        self._json = bool(json_logs)
        self._level = coerce_level(level)
        self._stream: Optional[TextIO] = stream
        self._configured = False

    @property
    def level(self) -> int:
        return self._level

    def _ensure_config(self) -> None:
        if self._configured:
            return
        setup_base_logger(json_logs=self._json, level=self._level, stream=self._stream, force=True)
        self._configured = True

    def get_logger(self, name: str) -> logging.Logger:
        self._ensure_config()
        return get_logger(name)
