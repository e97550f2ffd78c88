from __future__ import annotations
"""
Path resolver for dotted context lookups.

``DottedPathResolver.resolve(root, "user.profile.id")`` walks nested
mappings one segment at a time. Absence is a value, not an error: a missing
key, a ``None`` intermediate or any non-mapping intermediate yields
:data:`~tildetpl.core.values.UNDEFINED`.
"""

from collections.abc import Mapping
from typing import Any

from tildetpl.constants import PATH_SEPARATOR
from tildetpl.core.interfaces.resolve import PathResolverProtocol
from tildetpl.core.values import UNDEFINED


class DottedPathResolver(PathResolverProtocol):
    """Null-safe resolver over nested ``Mapping`` objects.

    Only mappings are traversed; sequences and arbitrary objects stop the
    walk. Lookups use ``Mapping.get`` so ``defaultdict`` factories are never
    triggered.
    """

    def __init__(self, *, separator: str = PATH_SEPARATOR) -> None:
        self._sep = separator

    def resolve(self, root: Any, path: str) -> Any:
        """Return the value at *path* inside *root*, or UNDEFINED."""
        if not isinstance(root, Mapping):
            return UNDEFINED
        current: Any = root
        for segment in path.split(self._sep):
            if not isinstance(current, Mapping):
                return UNDEFINED
            current = current.get(segment, UNDEFINED)
        return current


# Public default.
DefaultPathResolver = DottedPathResolver

_default = DottedPathResolver()


def resolve(root: Any, path: str) -> Any:
    """Module-level shortcut around the default resolver."""
    return _default.resolve(root, path)
