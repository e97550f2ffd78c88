"""
template_engine – Concrete TemplateEngineProtocol implementation for tildetpl.

The engine is a thin facade over :class:`StringInterpolator` and
:class:`StructuralInterpolator` exposing a Protocol-based surface suitable
for DI and unit testing.
"""

import logging
from typing import Any, Mapping, Optional

from tildetpl.core.interfaces.diagnostics import DiagnosticSinkProtocol
from tildetpl.core.interfaces.templating import TemplateEngineProtocol
from tildetpl.logging.helpers import get_logger
from tildetpl.processing.string_interpolator import StringInterpolator
from tildetpl.rendering.structural import StructuralInterpolator


class TildeTemplateEngine(TemplateEngineProtocol):
    """``~{expr}`` template engine.

    Behaviour:
      • render()      → one template string, always returns a string
      • render_deep() → same rules applied to every string in nested data

    *sink* configures the default interpolator only; combining it with an
    explicit *interpolator* raises ValueError.
    """

    def __init__(
        self,
        *,
        interpolator: Optional[StringInterpolator] = None,
        structural: Optional[StructuralInterpolator] = None,
        sink: Optional[DiagnosticSinkProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if interpolator is not None and sink is not None:
            raise ValueError('pass sink to the StringInterpolator, not alongside it')
        self._log = logger or get_logger('templates')
        self._interp = interpolator or StringInterpolator(sink=sink, logger=self._log)
        self._deep = structural or StructuralInterpolator(interpolator=self._interp)

    @property
    def interpolator(self) -> StringInterpolator:
        return self._interp

    def render(self, template: str, variables: Mapping[str, Any]) -> str:
        """Render *template* replacing ``~{placeholders}`` via *variables*."""
        return self._interp.interpolate(template, variables)

    def render_deep(self, value: Any, variables: Mapping[str, Any]) -> Any:
        """Render every string leaf of *value* via *variables*."""
        return self._deep.interpolate(value, variables)
