"""
cmdline-args - Command-line token parser

Splits process invocation tokens into long options (--foo, --foo=bar),
short options (-a, -abc, -k=value) and positional arguments, with a
boolean helper for yes/no style flag values.

    >>> from cmdline_args import parse_args, get_boolean
    >>> result = parse_args(["--verbose=yes", "-ab", "input.txt"])
    >>> result.short
    {'a': True, 'b': True}
    >>> get_boolean("verbose")
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cmdline_args.core.lazy import make_getattr

__all__ = [
    "ArgumentSourceError",
    "CmdlineArgsError",
    "ConfigurationError",
    "ParseResult",
    "ParserConfig",
    "__version__",
    "coerce_bool",
    "get_boolean",
    "main",
    "parse_args",
]

if TYPE_CHECKING:
    from cmdline_args.api import get_boolean, parse_args
    from cmdline_args.cli.main import main
    from cmdline_args.core.config import ParserConfig
    from cmdline_args.core.exceptions import ArgumentSourceError, CmdlineArgsError, ConfigurationError
    from cmdline_args.core.version import __version__
    from cmdline_args.parsing.coercion import coerce_bool
    from cmdline_args.parsing.models import ParseResult

__getattr__ = make_getattr(
    __name__,
    {
        "ArgumentSourceError": "cmdline_args.core.exceptions",
        "CmdlineArgsError": "cmdline_args.core.exceptions",
        "ConfigurationError": "cmdline_args.core.exceptions",
        "ParseResult": "cmdline_args.parsing.models",
        "ParserConfig": "cmdline_args.core.config",
        "__version__": "cmdline_args.core.version",
        "coerce_bool": "cmdline_args.parsing.coercion",
        "get_boolean": "cmdline_args.api",
        "main": "cmdline_args.cli.main",
        "parse_args": "cmdline_args.api",
    },
)
