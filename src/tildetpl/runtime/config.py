from __future__ import annotations

"""Typed engine configuration.

``EngineConfig`` is an immutable blob consumed by
:class:`tildetpl.runtime.container.EngineBuilder`. It can be built in code
or from the environment:

    TILDETPL_JSON_LOGS=1     → JSON log lines
    TILDETPL_LOG_LEVEL=debug → base logger level (name or number)
    TILDETPL_TRACE=1         → debug traces per placeholder
"""

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional, TextIO

from tildetpl.constants import ENV_JSON_LOGS, ENV_LOG_LEVEL, ENV_TRACE
from tildetpl.core.interfaces.diagnostics import DiagnosticSinkProtocol
from tildetpl.logging.factory import coerce_level

_TRUE = {'1', 'true', 'yes', 'on'}


def _flag(value: Optional[str]) -> bool:
    return (value or '').strip().lower() in _TRUE


@dataclass(frozen=True)
class EngineConfig:
    """Immutable configuration used to seed the EngineBuilder."""
    json_logs: bool = False
    log_level: int = logging.INFO
    trace: bool = False
    stream: Optional[TextIO] = None
    sink: Optional[DiagnosticSinkProtocol] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> 'EngineConfig':
        """Build a config from TILDETPL_* variables, then apply *overrides*."""
        env = os.environ if environ is None else environ
        cfg = cls(
            json_logs=_flag(env.get(ENV_JSON_LOGS)),
            log_level=coerce_level(env.get(ENV_LOG_LEVEL)),
            trace=_flag(env.get(ENV_TRACE)),
        )
        return replace(cfg, **overrides) if overrides else cfg
