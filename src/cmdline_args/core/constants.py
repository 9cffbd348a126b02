"""Constants and default values for cmdline-args.

This module centralizes the fixed tables and defaults used throughout the
package.
"""

# ==================== TOKEN SYNTAX ====================

LONG_PREFIX: str = "--"
SHORT_PREFIX: str = "-"
VALUE_SEPARATOR: str = "="
DEFAULT_ESCAPE_MARKER: str = "\\"

# Stripped one matching pair at a time, double quotes first
QUOTE_CHARS: tuple[str, ...] = ('"', "'")

# ==================== BOOLEAN LITERALS ====================

TRUTHY_LITERALS: frozenset[str] = frozenset({"y", "yes", "true", "1", "on"})
FALSY_LITERALS: frozenset[str] = frozenset({"n", "no", "false", "0", "off"})

# ==================== LOGGING DEFAULTS ====================

LOG_LEVEL_ENV_VAR: str = "CMDLINE_ARGS_LOG_LEVEL"
VALID_LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# ==================== ENVIRONMENT ====================

# ParserConfig field -> environment variable
ENV_VAR_MAPPING: dict[str, str] = {
    "escape_marker": "CMDLINE_ARGS_ESCAPE_MARKER",
    "flush_trailing_join": "CMDLINE_ARGS_FLUSH_TRAILING_JOIN",
    "string_separator": "CMDLINE_ARGS_STRING_SEPARATOR",
}
