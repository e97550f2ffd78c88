from __future__ import annotations
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class PathResolverProtocol(Protocol):
    def resolve(self, root: Any, path: str) -> Any:
        ...
