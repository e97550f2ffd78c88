from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates the placeholder syntax and the expression grammar so
the scanner and the evaluator agree on a single source of truth.
"""

# Placeholder span: "~{" + shortest run of non-"}" characters + "}".
PLACEHOLDER_PATTERN: str = r'~\{([^}]*)\}'

STRING_LITERAL_PATTERN: str = r'([\'"])(.*)\1'
NUMBER_LITERAL_PATTERN: str = r'-?[0-9]+(\.[0-9]+)?'
IDENTIFIER_PATTERN: str = r'[A-Za-z_$][A-Za-z0-9_$]*'
IDENTIFIER_PATH_PATTERN: str = rf'{IDENTIFIER_PATTERN}(\.{IDENTIFIER_PATTERN})*'

PATH_SEPARATOR: str = '.'
TERNARY_MARK: str = '?'
TERNARY_SEPARATOR: str = ':'

# Environment switches read by tildetpl.runtime.config / tildetpl.logging.
ENV_TRACE: str = 'TILDETPL_TRACE'
ENV_JSON_LOGS: str = 'TILDETPL_JSON_LOGS'
ENV_LOG_LEVEL: str = 'TILDETPL_LOG_LEVEL'
ENV_VERSION: str = 'TILDETPL_VERSION'

BASE_LOGGER_NAME: str = 'tildetpl'
