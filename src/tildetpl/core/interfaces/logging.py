from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """Logging surface used by sinks and engines (``logging.Logger`` fits)."""

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def warning(self, msg: str, *args, **kwargs) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Hands out loggers scoped under the tildetpl namespace."""

    def get_logger(self, name: str) -> LoggerLikeProtocol:
        ...
