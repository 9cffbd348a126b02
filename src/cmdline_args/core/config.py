"""Configuration dataclasses for cmdline-args.

These dataclasses centralize the tunable parts of parsing and logging. They
can be built from the environment, from the command-line tool's arguments,
or used directly in code.
"""

from __future__ import annotations

import argparse
import os
from collections.abc import Mapping
from dataclasses import dataclass

from cmdline_args.core.exceptions import ConfigurationError

VALID_LOG_FORMATS = ("text", "json")


@dataclass
class LogConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level string (default: "INFO")
        format: "text" or "json" (default: "text")
        file: Optional log file path; console only when None
        file_max_bytes: Maximum size per log file (default: 10MB)
        file_backup_count: Number of backup log files (default: 5)
    """

    level: str = "INFO"
    format: str = "text"
    file: str | None = None
    file_max_bytes: int = 10 * 1024 * 1024  # 10MB
    file_backup_count: int = 5

    def validate(self) -> LogConfig:
        if self.format.lower() not in VALID_LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format '{self.format}'",
                field="format",
                details=f"expected one of {', '.join(VALID_LOG_FORMATS)}",
            )
        if self.file_max_bytes < 1:
            raise ConfigurationError("file_max_bytes must be at least 1", field="file_max_bytes")
        if self.file_backup_count < 0:
            raise ConfigurationError("file_backup_count cannot be negative", field="file_backup_count")
        return self


@dataclass
class ParserConfig:
    """Configuration for turning raw tokens into a ParseResult.

    Attributes:
        escape_marker: Trailing marker that joins a token with the next one (default: "\\")
        flush_trailing_join: Emit a dangling joined token at end of input instead
            of dropping it (default: False)
        string_separator: Literal separator used when argv is a single string (default: " ")
        drop_program_name: Drop sys.argv[0] when reading the process arguments (default: True)
    """

    escape_marker: str = "\\"
    flush_trailing_join: bool = False
    string_separator: str = " "
    drop_program_name: bool = True

    def validate(self) -> ParserConfig:
        """Check field values, returning self so calls can be chained."""
        if not self.escape_marker:
            raise ConfigurationError("Escape marker cannot be empty", field="escape_marker")
        if not self.string_separator:
            raise ConfigurationError("String separator cannot be empty", field="string_separator")
        return self

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ParserConfig:
        """Create configuration from CMDLINE_ARGS_* environment variables.

        Unset variables keep their defaults. Boolean variables accept the same
        literals as get_boolean (yes/no, on/off, 1/0, ...).
        """
        from cmdline_args.core.constants import ENV_VAR_MAPPING
        from cmdline_args.parsing.coercion import BOOLEAN_LITERALS

        if environ is None:
            environ = os.environ

        config = cls()
        for field_name, env_var in ENV_VAR_MAPPING.items():
            raw = environ.get(env_var)
            if raw is None:
                continue
            if isinstance(getattr(config, field_name), bool):
                normalized = raw.strip().lower()
                if normalized not in BOOLEAN_LITERALS:
                    raise ConfigurationError(
                        f"Invalid boolean for {env_var}", field=field_name, details=repr(raw)
                    )
                setattr(config, field_name, BOOLEAN_LITERALS[normalized])
            else:
                setattr(config, field_name, raw)
        return config.validate()

    @classmethod
    def from_args(cls, args: argparse.Namespace, base: ParserConfig | None = None) -> ParserConfig:
        """Overlay command-line tool arguments on top of base (or the defaults)."""
        config = base or cls()
        if getattr(args, "flush_trailing_join", False):
            config.flush_trailing_join = True
        escape_marker = getattr(args, "escape_marker", None)
        if escape_marker is not None:
            config.escape_marker = escape_marker
        return config.validate()
