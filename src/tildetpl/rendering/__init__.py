"""Public API surface for tildetpl.rendering."""
__all__ = [
    "path_resolver",
    "structural",
    "template_engine",
]
