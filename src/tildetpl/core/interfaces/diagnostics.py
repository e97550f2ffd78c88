from __future__ import annotations
from typing import Protocol, runtime_checkable

from tildetpl.core.exceptions import EvaluationError


@runtime_checkable
class DiagnosticSinkProtocol(Protocol):
    """Receives non-fatal evaluation failures.

    Any plain callable with the same signature is accepted wherever a sink
    is expected.
    """

    def __call__(self, expression: str, error: EvaluationError) -> None:
        ...
