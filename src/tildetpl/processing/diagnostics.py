"""
diagnostics – Ready-made sinks for non-fatal evaluation failures.

A sink is any callable ``(expression, error) -> None``. The interpolator
calls it once per placeholder that fails to evaluate and ignores whatever it
returns or raises.
"""

import logging
from typing import List, Optional, Tuple

from tildetpl.core.exceptions import EvaluationError
from tildetpl.core.interfaces.diagnostics import DiagnosticSinkProtocol
from tildetpl.logging.helpers import get_logger


class LoggingDiagnosticSink(DiagnosticSinkProtocol):
    """Report failures as warnings on the 'tildetpl.templates' logger."""

    MESSAGE = 'Failed to evaluate template expression: "%s"'

    def __init__(self, *, logger: Optional[logging.Logger] = None, level: int = logging.WARNING) -> None:
        self._log = logger or get_logger('templates')
        self._level = level

    def __call__(self, expression: str, error: EvaluationError) -> None:
        self._log.log(
            self._level,
            self.MESSAGE,
            expression,
            extra={'context': {'error': type(error).__name__, 'detail': str(error)}},
        )


class CollectingDiagnosticSink(DiagnosticSinkProtocol):
    """Keep every reported ``(expression, error)`` pair in memory."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, EvaluationError]] = []

    def __call__(self, expression: str, error: EvaluationError) -> None:
        self.records.append((expression, error))

    @property
    def expressions(self) -> List[str]:
        return [expr for expr, _ in self.records]

    def __len__(self) -> int:
        return len(self.records)

    def clear(self) -> None:
        self.records.clear()


class NullDiagnosticSink(DiagnosticSinkProtocol):
    """Discard every failure."""

    def __call__(self, expression: str, error: EvaluationError) -> None:
        return None
