"""Argument parsing for the cmdline-args tool itself."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from cmdline_args.core.constants import VALID_LOG_LEVELS
from cmdline_args.core.version import __version__

# Attempt to load argcomplete for shell tab-completion (optional dependency)
try:
    import argcomplete

    _ARGCOMPLETE_AVAILABLE = True
except ImportError:
    _ARGCOMPLETE_AVAILABLE = False

TOKEN_SEPARATOR = "--"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cmdline-args",
        description="Show how a command line splits into long options, short options and positionals",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Positionals only
  cmdline-args arg1 arg2 arg3

  # Anything that looks like an option goes after --
  cmdline-args -- --foo --bar=baz -abc -k=value

  # JSON output
  cmdline-args --format json -- --name="John Doe"

  # Boolean lookups
  cmdline-args --bool flag --bool verbose=yes -- --flag=off

  # Escaped spaces: Jan\\ Kowalski
  cmdline-args -- 'Jan\\' Kowalski
        """,
    )

    parser.add_argument("tokens", nargs="*", metavar="TOKEN", help="Tokens to parse (put option-like tokens after --)")
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format for the parse result (default: text)",
    )
    parser.add_argument(
        "--bool",
        dest="bool_keys",
        action="append",
        default=[],
        metavar="KEY[=DEFAULT]",
        help="Print KEY coerced to true/false; repeatable. DEFAULT is any yes/no literal (default: no)",
    )
    parser.add_argument(
        "--flush-trailing-join",
        action="store_true",
        help="Keep a token left open by a trailing escape marker instead of dropping it",
    )
    parser.add_argument(
        "--escape-marker",
        default=None,
        help="Trailing marker that joins a token with the next one (default: backslash)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=list(VALID_LOG_LEVELS),
        default=None,
        help="Logging level (default: CMDLINE_ARGS_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--log-format",
        choices=["text", "json"],
        default="text",
        help="Log output format (default: text)",
    )
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    if _ARGCOMPLETE_AVAILABLE:
        argcomplete.autocomplete(parser)

    return parser


def split_argv(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split at the first "--": tool options before it, raw tokens after it."""
    argv = list(argv)
    if TOKEN_SEPARATOR in argv:
        index = argv.index(TOKEN_SEPARATOR)
        return argv[:index], argv[index + 1:]
    return argv, []


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the tool's own options; args.tokens holds every token to analyse."""
    if argv is None:
        argv = sys.argv[1:]

    tool_argv, raw_tokens = split_argv(argv)
    args = build_parser().parse_args(tool_argv)
    args.tokens = list(args.tokens) + raw_tokens
    return args
