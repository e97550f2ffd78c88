from __future__ import annotations

from typing import Any, Mapping, Optional

from tildetpl.core.exceptions import (
    EvaluationError,
    InvalidTernaryStructure,
    TemplateError,
    UnsupportedExpression,
)
from tildetpl.core.interfaces.diagnostics import DiagnosticSinkProtocol
from tildetpl.core.interfaces.templating import TemplateEngineProtocol
from tildetpl.core.values import UNDEFINED, is_truthy, stringify
from tildetpl.logging.helpers import get_logger
from tildetpl.processing.diagnostics import (
    CollectingDiagnosticSink,
    LoggingDiagnosticSink,
    NullDiagnosticSink,
)
from tildetpl.processing.expression import ExpressionEvaluator, evaluate
from tildetpl.processing.string_interpolator import StringInterpolator
from tildetpl.rendering.path_resolver import DefaultPathResolver, DottedPathResolver, resolve
from tildetpl.rendering.structural import StructuralInterpolator
from tildetpl.rendering.template_engine import TildeTemplateEngine
from tildetpl.runtime.config import EngineConfig
from tildetpl.runtime.container import EngineBuilder

__version__ = '0.3.1'

_interpolator = StringInterpolator()
_structural = StructuralInterpolator(interpolator=_interpolator)


def interpolate(
    template: str,
    context: Mapping[str, Any],
    *,
    sink: Optional[DiagnosticSinkProtocol] = None,
) -> str:
    """Interpolate every ``~{expr}`` in *template*; never raises.

    Failures are reported to *sink* (default: a warning on the
    'tildetpl.templates' logger) and the placeholder is left as written.
    """
    return _interpolator.interpolate(template, context, sink=sink)


def interpolate_deep(
    value: Any,
    context: Mapping[str, Any],
    *,
    sink: Optional[DiagnosticSinkProtocol] = None,
) -> Any:
    """Interpolate every string inside lists, tuples and plain dicts."""
    return _structural.interpolate(value, context, sink=sink)


def engine_factory(
    *,
    sink: Optional[DiagnosticSinkProtocol] = None,
    config: Optional[EngineConfig] = None,
) -> TildeTemplateEngine:
    """Factory helper that returns a wired TildeTemplateEngine.

    Falls back to EngineConfig.from_env() when no config is provided.
    """
    cfg = config or EngineConfig.from_env()
    builder = EngineBuilder.from_config(cfg)
    if sink is not None:
        builder.sink = sink
    return builder.build()


__all__ = [
    'interpolate',
    'interpolate_deep',
    'evaluate',
    'resolve',
    'engine_factory',
    'UNDEFINED',
    'is_truthy',
    'stringify',
    'TemplateError',
    'EvaluationError',
    'UnsupportedExpression',
    'InvalidTernaryStructure',
    'DiagnosticSinkProtocol',
    'TemplateEngineProtocol',
    'CollectingDiagnosticSink',
    'LoggingDiagnosticSink',
    'NullDiagnosticSink',
    'ExpressionEvaluator',
    'StringInterpolator',
    'StructuralInterpolator',
    'DottedPathResolver',
    'DefaultPathResolver',
    'TildeTemplateEngine',
    'EngineBuilder',
    'EngineConfig',
    'get_logger',
]
