"""CLI entrypoint for cmdline-args."""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence

from dotenv import load_dotenv

from cmdline_args.api import get_boolean, parse_args
from cmdline_args.cli.parser import parse_arguments
from cmdline_args.core.config import ParserConfig
from cmdline_args.core.exceptions import CmdlineArgsError, ConfigurationError
from cmdline_args.core.logging import setup_logging
from cmdline_args.parsing.coercion import BOOLEAN_LITERALS
from cmdline_args.parsing.models import OptionValue, ParseResult


def _format_value(value: OptionValue) -> str:
    if value is True:
        return "true"
    return json.dumps(value)


def format_text(result: ParseResult) -> str:
    """Render a result as [long]/[short]/[opts] sections."""
    lines = ["[long]"]
    lines.extend(f"  {key!r:<10} => {_format_value(value)}" for key, value in result.long.items())
    lines.append("[short]")
    lines.extend(f"  {key!r:<10} => {_format_value(value)}" for key, value in result.short.items())
    lines.append("[opts]")
    lines.extend(f"  [{index}]{'':<6} => {json.dumps(arg)}" for index, arg in enumerate(result.opts))
    return "\n".join(lines)


def _parse_bool_spec(spec: str) -> tuple[str, bool]:
    """Split "KEY" or "KEY=DEFAULT" from --bool."""
    key, sep, raw_default = spec.partition("=")
    if not sep:
        return key, False
    normalized = raw_default.strip().lower()
    if normalized not in BOOLEAN_LITERALS:
        raise ConfigurationError(f"Invalid default for --bool {key}", field="bool", details=repr(raw_default))
    return key, BOOLEAN_LITERALS[normalized]


def _exit_error(message: str) -> None:
    print(f"ERROR: {message}", file=sys.stderr)
    sys.exit(1)


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the cmdline-args tool"""
    args = parse_arguments(argv)

    load_dotenv()
    logger = setup_logging(log_level=args.log_level, log_format=args.log_format, log_file=args.log_file)

    try:
        config = ParserConfig.from_args(args, base=ParserConfig.from_env())
        bool_specs = [_parse_bool_spec(spec) for spec in args.bool_keys]
        result = parse_args(args.tokens, config=config)
    except CmdlineArgsError as e:
        logger.debug("Aborting", exc_info=True)
        _exit_error(str(e))

    if args.format == "json":
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(format_text(result))

    for key, default in bool_specs:
        print(f"{key}={'true' if get_boolean(key, default) else 'false'}")

    logger.debug(f"Reported {len(result.opts)} positionals and {len(bool_specs)} boolean lookups")
    return 0
