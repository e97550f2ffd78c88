from .diagnostics import DiagnosticSinkProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .resolve import PathResolverProtocol
from .templating import ExpressionEvaluatorProtocol, TemplateEngineProtocol

__all__ = [
    'DiagnosticSinkProtocol',
    'ExpressionEvaluatorProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'PathResolverProtocol',
    'TemplateEngineProtocol',
]
