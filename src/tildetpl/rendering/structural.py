"""
structural – Apply ``~{...}`` interpolation to every string inside a value tree.

The walk is a structural recursion over :class:`~tildetpl.core.values.NodeKind`:

  • TEXT      → interpolated with :class:`StringInterpolator`
  • SEQUENCE  → new list / tuple, same order
  • MAPPING   → new dict, same keys in the same order
  • SCALAR    → returned as is
  • OPAQUE    → returned as is (same object), e.g. datetime, re.Pattern,
                class instances, dict/list subclasses

Input containers are never mutated.
"""

from typing import Any, Mapping, Optional

from tildetpl.core.interfaces.diagnostics import DiagnosticSinkProtocol
from tildetpl.core.values import NodeKind, classify
from tildetpl.processing.string_interpolator import StringInterpolator


class StructuralInterpolator:
    """Deep variant of :class:`StringInterpolator` for nested data."""

    def __init__(self, *, interpolator: Optional[StringInterpolator] = None) -> None:
        self._interp = interpolator or StringInterpolator()

    def interpolate(
        self,
        value: Any,
        context: Mapping[str, Any],
        *,
        sink: Optional[DiagnosticSinkProtocol] = None,
    ) -> Any:
        """Return a copy of *value* with every string leaf interpolated."""
        kind = classify(value)
        if kind is NodeKind.TEXT:
            return self._interp.interpolate(value, context, sink=sink)
        if kind is NodeKind.SEQUENCE:
            items = [self.interpolate(item, context, sink=sink) for item in value]
            return items if type(value) is list else tuple(items)
        if kind is NodeKind.MAPPING:
            return {key: self.interpolate(val, context, sink=sink) for key, val in value.items()}
        return value
