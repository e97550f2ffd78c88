"""Public surface for tildetpl.core.

Protocols, the value model and the exception hierarchy live here so that
implementation modules and callers share one import location:

    from tildetpl.core import UNDEFINED, UnsupportedExpression, DiagnosticSinkProtocol
"""

from tildetpl.core.exceptions import (
    EvaluationError,
    InvalidTernaryStructure,
    TemplateError,
    UnsupportedExpression,
)
from tildetpl.core.interfaces import (
    DiagnosticSinkProtocol,
    ExpressionEvaluatorProtocol,
    LoggerFactoryProtocol,
    LoggerLikeProtocol,
    PathResolverProtocol,
    TemplateEngineProtocol,
)
from tildetpl.core.values import UNDEFINED, NodeKind, classify, is_truthy, stringify

__all__ = [
    # Errors
    'TemplateError',
    'EvaluationError',
    'UnsupportedExpression',
    'InvalidTernaryStructure',
    # Protocols
    'DiagnosticSinkProtocol',
    'ExpressionEvaluatorProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'PathResolverProtocol',
    'TemplateEngineProtocol',
    # Values
    'UNDEFINED',
    'NodeKind',
    'classify',
    'is_truthy',
    'stringify',
]
