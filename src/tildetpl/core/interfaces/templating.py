from __future__ import annotations
from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class TemplateEngineProtocol(Protocol):
    """Protocol for very small, string-based template engines."""

    def render(self, template: str, variables: Mapping[str, Any]) -> str:
        ...

    def render_deep(self, value: Any, variables: Mapping[str, Any]) -> Any:
        ...


@runtime_checkable
class ExpressionEvaluatorProtocol(Protocol):
    """Evaluates the trimmed text of a single placeholder."""

    def evaluate(self, expr: str, context: Mapping[str, Any]) -> Any:
        ...
