"""Public API surface for tildetpl.processing."""
__all__ = [
    "diagnostics",
    "expression",
    "string_interpolator",
]
