"""
values – Evaluated values and tree node classification.

Evaluated values are plain Python objects (``str``, ``int``, ``float``,
``bool``, ``None``) plus the :data:`UNDEFINED` sentinel that marks a value
which is absent rather than null. Every truthiness decision and every
conversion to text goes through :func:`is_truthy` and :func:`stringify`.

Structured inputs of the deep interpolator are classified once per node with
:func:`classify`.
"""

import enum
import math
from typing import Any


class _Undefined:
    """Singleton marker for "no value" (missing key, ``undefined`` literal)."""

    _instance = None

    def __new__(cls) -> '_Undefined':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return 'UNDEFINED'

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


def is_nullish(value: Any) -> bool:
    """Return True for ``None`` and :data:`UNDEFINED`."""
    return value is None or value is UNDEFINED


def is_truthy(value: Any) -> bool:
    """Truthiness used by the ternary conditional.

    Falsy values are ``False``, ``0``, ``0.0``, ``""``, ``None``,
    :data:`UNDEFINED` and ``NaN``. Every other value is truthy, including
    empty containers.
    """
    if is_nullish(value):
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, float):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ''
    return True


def _format_number(value: float) -> str:
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value.is_integer():
        return str(int(value))
    return repr(value)


def stringify(value: Any) -> str:
    """Render an evaluated value as substitution text.

    ``None`` and :data:`UNDEFINED` render empty, booleans as ``true`` /
    ``false`` and numbers in their shortest decimal form. Lists, dicts and
    other objects fall back to ``str()`` (``['a', 'b']``, not ``a,b``).
    """
    if is_nullish(value):
        return ''
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_number(value)
    return str(value)


class NodeKind(enum.Enum):
    TEXT = 'text'
    SEQUENCE = 'sequence'
    MAPPING = 'mapping'
    SCALAR = 'scalar'
    OPAQUE = 'opaque'


_SCALAR_TYPES = (bool, int, float, complex, type(None), _Undefined)


def classify(value: Any) -> NodeKind:
    """Classify *value* for the structural walk.

    Only exact ``list``/``tuple``/``dict`` instances are containers; their
    subclasses carry behaviour of their own and are treated as opaque.
    """
    if isinstance(value, str):
        return NodeKind.TEXT
    kind = type(value)
    if kind is list or kind is tuple:
        return NodeKind.SEQUENCE
    if kind is dict:
        return NodeKind.MAPPING
    if isinstance(value, _SCALAR_TYPES):
        return NodeKind.SCALAR
    return NodeKind.OPAQUE


__all__ = [
    'UNDEFINED',
    'NodeKind',
    'classify',
    'is_nullish',
    'is_truthy',
    'stringify',
]
