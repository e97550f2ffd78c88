from __future__ import annotations

"""Exception hierarchy for tildetpl.

Only the expression evaluator raises these; the interpolators catch them per
placeholder and hand them to the diagnostic sink.
"""


class TemplateError(Exception):
    """Base class for every error raised by tildetpl."""


class EvaluationError(TemplateError):
    """An expression inside a placeholder could not be evaluated."""

    def __init__(self, expression: str, reason: str | None = None) -> None:
        self.expression = expression
        self.reason = reason or 'evaluation failed'
        super().__init__(f'{self.reason}: "{expression}"')


class UnsupportedExpression(EvaluationError):
    """The expression matches none of the recognized forms."""

    def __init__(self, expression: str, reason: str | None = None) -> None:
        super().__init__(expression, reason or 'Invalid or unsupported expression')


class InvalidTernaryStructure(UnsupportedExpression):
    """A ``?`` is present but the text does not split into three parts.

    Subclass of :class:`UnsupportedExpression`: a malformed ternary is the
    generic fallback failure with a more specific message.
    """

    def __init__(self, expression: str, reason: str | None = None) -> None:
        super().__init__(expression, reason or 'Malformed ternary expression')


__all__ = [
    'TemplateError',
    'EvaluationError',
    'UnsupportedExpression',
    'InvalidTernaryStructure',
]
