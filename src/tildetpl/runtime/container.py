from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from tildetpl.core.interfaces.diagnostics import DiagnosticSinkProtocol
from tildetpl.core.interfaces.logging import LoggerFactoryProtocol
from tildetpl.core.interfaces.resolve import PathResolverProtocol
from tildetpl.core.interfaces.templating import ExpressionEvaluatorProtocol
from tildetpl.logging.factory import DefaultLoggerFactory
from tildetpl.logging.helpers import set_trace_enabled
from tildetpl.processing.diagnostics import LoggingDiagnosticSink
from tildetpl.processing.expression import ExpressionEvaluator
from tildetpl.processing.string_interpolator import StringInterpolator
from tildetpl.rendering.path_resolver import DottedPathResolver
from tildetpl.rendering.structural import StructuralInterpolator
from tildetpl.rendering.template_engine import TildeTemplateEngine
from tildetpl.runtime.config import EngineConfig


@dataclass
class EngineBuilder:
    """Composable builder that wires the default collaborators into a TildeTemplateEngine."""
    config: EngineConfig

    # Optional overrides / DI hooks
    logger_factory: Optional[LoggerFactoryProtocol] = None
    resolver: Optional[PathResolverProtocol] = None
    evaluator: Optional[ExpressionEvaluatorProtocol] = None
    sink: Optional[DiagnosticSinkProtocol] = None

    @classmethod
    def from_config(cls, cfg: EngineConfig) -> 'EngineBuilder':
        """Build a new EngineBuilder from a single EngineConfig."""
        return cls(config=cfg, sink=cfg.sink)

    @classmethod
    def from_env(cls, **overrides) -> 'EngineBuilder':
        return cls.from_config(EngineConfig.from_env(**overrides))

    def _logger_factory(self) -> LoggerFactoryProtocol:
        if self.logger_factory is not None:
            return self.logger_factory
        cfg = self.config
        level = logging.DEBUG if cfg.trace else cfg.log_level
        return DefaultLoggerFactory(json_logs=cfg.json_logs, level=level, stream=cfg.stream)

    def build(self) -> TildeTemplateEngine:
        if self.config.trace:
            set_trace_enabled(True)

        factory = self._logger_factory()
        log = factory.get_logger('templates')

        resolver = self.resolver or DottedPathResolver()
        evaluator = self.evaluator or ExpressionEvaluator(
            resolver=resolver, logger=factory.get_logger('expression')
        )
        sink = self.sink or LoggingDiagnosticSink(logger=log)
        interpolator = StringInterpolator(evaluator=evaluator, sink=sink, logger=log)
        return TildeTemplateEngine(
            interpolator=interpolator,
            structural=StructuralInterpolator(interpolator=interpolator),
            logger=log,
        )
