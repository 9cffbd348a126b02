"""Core module - Foundation components shared by parsing and the CLI.

- Version information
- Custom exceptions
- Configuration dataclasses
- Constants and defaults
- Logging setup
"""

from cmdline_args.core.version import __version__

from cmdline_args.core.exceptions import (
    CmdlineArgsError,
    ConfigurationError,
    ArgumentSourceError,
)

from cmdline_args.core.config import (
    LogConfig,
    ParserConfig,
)

from cmdline_args.core.constants import (
    LONG_PREFIX,
    SHORT_PREFIX,
    VALUE_SEPARATOR,
    DEFAULT_ESCAPE_MARKER,
    QUOTE_CHARS,
    TRUTHY_LITERALS,
    FALSY_LITERALS,
    ENV_VAR_MAPPING,
)

from cmdline_args.core.logging import (
    JSONFormatter,
    SensitiveDataFilter,
    redact_message,
    setup_logging,
)

__all__ = [
    # Version
    '__version__',
    # Exceptions
    'CmdlineArgsError',
    'ConfigurationError',
    'ArgumentSourceError',
    # Config dataclasses
    'LogConfig',
    'ParserConfig',
    # Constants
    'LONG_PREFIX',
    'SHORT_PREFIX',
    'VALUE_SEPARATOR',
    'DEFAULT_ESCAPE_MARKER',
    'QUOTE_CHARS',
    'TRUTHY_LITERALS',
    'FALSY_LITERALS',
    'ENV_VAR_MAPPING',
    # Logging
    'JSONFormatter',
    'SensitiveDataFilter',
    'redact_message',
    'setup_logging',
]
