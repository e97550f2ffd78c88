"""
expression – Evaluation of the text inside a single ``~{...}`` placeholder.

Supported forms, tested in this order against the whole trimmed text:

  • "text" / 'text'                 → the inner text, verbatim (no escapes)
  • true / false / null / undefined → True / False / None / UNDEFINED
  • -12 / 3.5                       → int / float
  • user.profile.id                 → dotted lookup in the context
  • cond ? when_true : when_false   → ternary on the truthiness of *cond*

There is no arithmetic, no operators and no function calls. Anything else
raises :class:`~tildetpl.core.exceptions.UnsupportedExpression`.
"""

import logging
import re
from typing import Any, Mapping, Optional, Tuple

from tildetpl.constants import (
    IDENTIFIER_PATH_PATTERN,
    NUMBER_LITERAL_PATTERN,
    STRING_LITERAL_PATTERN,
    TERNARY_MARK,
    TERNARY_SEPARATOR,
)
from tildetpl.core.exceptions import InvalidTernaryStructure, UnsupportedExpression
from tildetpl.core.interfaces.resolve import PathResolverProtocol
from tildetpl.core.interfaces.templating import ExpressionEvaluatorProtocol
from tildetpl.core.values import UNDEFINED, is_truthy
from tildetpl.logging.helpers import get_logger, trace
from tildetpl.rendering.path_resolver import DottedPathResolver

_KEYWORDS = {
    'true': True,
    'false': False,
    'null': None,
    'undefined': UNDEFINED,
}


class ExpressionEvaluator(ExpressionEvaluatorProtocol):
    """Classify and evaluate one placeholder expression.

    The evaluator is stateless apart from its collaborators and may be
    shared between threads.
    """

    _STRING_RX = re.compile(STRING_LITERAL_PATTERN)
    _NUMBER_RX = re.compile(NUMBER_LITERAL_PATTERN)
    _PATH_RX = re.compile(IDENTIFIER_PATH_PATTERN)

    def __init__(
        self,
        *,
        resolver: Optional[PathResolverProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._resolver = resolver or DottedPathResolver()
        self._log = logger or get_logger('expression')

    def evaluate(self, expr: str, context: Mapping[str, Any]) -> Any:
        """Evaluate *expr* against *context*.

        Raises
        ------
        UnsupportedExpression
            When *expr* matches none of the recognized forms.
        InvalidTernaryStructure
            When *expr* contains ``?`` but does not split into a condition
            and two non-empty branches.
        """
        expr = expr.strip()
        found, value = self._evaluate_value(expr, context)
        if found:
            return value

        parts = self._split_ternary(expr)
        if parts is None:
            if TERNARY_MARK in expr:
                raise InvalidTernaryStructure(expr)
            raise UnsupportedExpression(expr)

        condition, when_true, when_false = parts
        test = self.evaluate(condition, context)
        trace(self._log, 'ternary condition evaluated', expr=expr, condition=condition, value=test)
        if is_truthy(test):
            return self.evaluate(when_true, context)
        return self.evaluate(when_false, context)

    def _evaluate_value(self, expr: str, context: Mapping[str, Any]) -> Tuple[bool, Any]:
        """Try the literal and path forms; return ``(matched, value)``."""
        m = self._STRING_RX.fullmatch(expr)
        if m:
            return True, m.group(2)

        if expr in _KEYWORDS:
            return True, _KEYWORDS[expr]

        m = self._NUMBER_RX.fullmatch(expr)
        if m:
            return True, float(expr) if m.group(1) else int(expr)

        if self._PATH_RX.fullmatch(expr):
            return True, self._resolver.resolve(context, expr)

        return False, None

    @staticmethod
    def _split_ternary(expr: str) -> Optional[Tuple[str, str, str]]:
        """Split ``cond ? a : b`` into its three trimmed parts.

        The outer check uses the last ``:`` while the branch split uses the
        first ``:`` after the ``?``, so a false branch may itself contain
        colons (``a ? b : c ? d : e`` nests on the right).
        """
        q = expr.find(TERNARY_MARK)
        c = expr.rfind(TERNARY_SEPARATOR)
        if q <= 0 or c == -1 or q > c or c == len(expr) - 1:
            return None

        condition = expr[:q].strip()
        rest = expr[q + 1:].strip()
        inner = rest.find(TERNARY_SEPARATOR)
        if inner == -1:
            return None

        when_true = rest[:inner].strip()
        when_false = rest[inner + 1:].strip()
        if not condition or not when_true or not when_false:
            return None
        return condition, when_true, when_false


_default = ExpressionEvaluator()


def evaluate(expr: str, context: Mapping[str, Any]) -> Any:
    """Module-level shortcut around a default :class:`ExpressionEvaluator`."""
    return _default.evaluate(expr, context)
