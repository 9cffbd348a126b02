"""Custom exceptions for cmdline-args.

Parsing itself never raises for a sequence of strings. These exceptions cover
misuse outside that contract: unsupported argument sources and invalid
configuration values.
"""


class CmdlineArgsError(Exception):
    """Base exception for all cmdline-args errors."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ConfigurationError(CmdlineArgsError):
    """Exception raised for invalid configuration values.

    Examples:
        - Empty escape marker
        - Unknown log format
        - Unparseable boolean in an environment variable
    """

    def __init__(self, message: str, field: str | None = None, details: str | None = None):
        self.field = field
        super().__init__(message, details)


class ArgumentSourceError(CmdlineArgsError, TypeError):
    """Raised when parse_args receives something other than strings.

    Subclasses TypeError so callers treating a bad argv as a type error
    keep working.
    """

    def __init__(self, message: str, source_type: str | None = None, details: str | None = None):
        self.source_type = source_type
        super().__init__(message, details)

    def __str__(self) -> str:
        parts = [self.message]
        if self.source_type:
            parts.append(f"got {self.source_type}")
        if self.details:
            parts.append(self.details)
        return " - ".join(parts)
