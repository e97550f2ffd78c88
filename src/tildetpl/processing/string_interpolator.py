"""
string_interpolator – ``~{expr}`` template interpolation.

This module encapsulates tildetpl's interpolation semantics into a small,
reusable class:

  • ~{name}          → context value, stringified ("" for null / no value)
  • ~{}              → "" (empty placeholder)
  • ~{a ? "x" : "y"} → ternary on the truthiness of ``a``
  • ~{bad!}          → left untouched; the failure goes to the diagnostic sink

Placeholders are found with a single left-to-right, shortest-match scan
*before* any expression is looked at. A placeholder nested inside another
one is therefore not resolved first: in ``~{flag ? ~{a} : ~{b}}`` the first
span is ``~{flag ? ~{a}`` (which fails and stays as written) and only
``~{b}`` resolves. Output is never re-scanned.
"""

import logging
import re
from typing import Any, Mapping, Optional

from tildetpl.constants import PLACEHOLDER_PATTERN
from tildetpl.core.exceptions import EvaluationError
from tildetpl.core.interfaces.diagnostics import DiagnosticSinkProtocol
from tildetpl.core.interfaces.templating import ExpressionEvaluatorProtocol
from tildetpl.core.values import stringify
from tildetpl.logging.helpers import get_logger, trace
from tildetpl.processing.diagnostics import LoggingDiagnosticSink
from tildetpl.processing.expression import ExpressionEvaluator


class StringInterpolator:
    """Replace every ``~{...}`` span of a template with its evaluated text.

    :meth:`interpolate` is total: it always returns a string, whatever the
    template and context contain.
    """

    _PLACEHOLDER_RX = re.compile(PLACEHOLDER_PATTERN)

    def __init__(
        self,
        *,
        evaluator: Optional[ExpressionEvaluatorProtocol] = None,
        sink: Optional[DiagnosticSinkProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._log = logger or get_logger('templates')
        self._eval = evaluator or ExpressionEvaluator()
        self._sink = sink if sink is not None else LoggingDiagnosticSink(logger=self._log)

    @property
    def sink(self) -> DiagnosticSinkProtocol:
        return self._sink

    def interpolate(
        self,
        template: str,
        context: Mapping[str, Any],
        *,
        sink: Optional[DiagnosticSinkProtocol] = None,
    ) -> str:
        """Interpolate *template* against *context*.

        Parameters
        ----------
        template:
            Text potentially containing ``~{expr}`` placeholders.
        context:
            Values visible to the expressions. Never mutated.
        sink:
            Optional per-call override of the diagnostic sink.

        Returns
        -------
        str
            The interpolated text. Placeholders that fail to evaluate are
            kept verbatim.
        """
        report = sink if sink is not None else self._sink

        def repl(m: re.Match) -> str:
            expression = m.group(1).strip()
            if not expression:
                return ''
            try:
                value = self._eval.evaluate(expression, context)
                text = stringify(value)
            except EvaluationError as exc:
                self._notify(report, expression, exc)
                return m.group(0)
            except Exception as exc:  # noqa: BLE001
                # Context objects may raise from lookups or __str__.
                error = EvaluationError(expression, f'{type(exc).__name__}: {exc}')
                error.__cause__ = exc
                self._notify(report, expression, error)
                return m.group(0)
            trace(self._log, 'placeholder resolved', expr=expression, value=value)
            return text

        return self._PLACEHOLDER_RX.sub(repl, template)

    def _notify(self, sink: DiagnosticSinkProtocol, expression: str, error: EvaluationError) -> None:
        try:
            sink(expression, error)
        except Exception as exc:  # noqa: BLE001
            # A broken sink must not change the rendered output.
            self._log.debug('diagnostic sink failed for %r: %s', expression, exc)
