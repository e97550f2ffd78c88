"""Logging helpers for tildetpl."""
from tildetpl.logging.factory import DefaultLoggerFactory
from tildetpl.logging.helpers import (
    JsonLogFormatter,
    get_logger,
    set_trace_enabled,
    setup_base_logger,
    trace,
)

__all__ = [
    'DefaultLoggerFactory',
    'JsonLogFormatter',
    'get_logger',
    'set_trace_enabled',
    'setup_base_logger',
    'trace',
]
