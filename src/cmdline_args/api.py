"""Public entry points: parse_args and get_boolean."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from cmdline_args.core.config import ParserConfig
from cmdline_args.core.exceptions import ArgumentSourceError
from cmdline_args.parsing.cache import get_cache
from cmdline_args.parsing.classifier import classify
from cmdline_args.parsing.coercion import get_boolean
from cmdline_args.parsing.joiner import join_escaped
from cmdline_args.parsing.models import ParseResult

__all__ = ["get_boolean", "parse_args"]

logger = logging.getLogger(__name__)


def _resolve_tokens(argv: Sequence[str] | str | None, config: ParserConfig) -> list[str]:
    if argv is None:
        tokens = sys.argv[1:] if config.drop_program_name else sys.argv[:]
        return list(tokens)

    if isinstance(argv, str):
        return argv.split(config.string_separator)

    if isinstance(argv, (bytes, bytearray)) or not isinstance(argv, Sequence):
        raise ArgumentSourceError(
            "argv must be a sequence of strings, a string or None", source_type=type(argv).__name__
        )

    tokens = list(argv)
    for index, token in enumerate(tokens):
        if not isinstance(token, str):
            raise ArgumentSourceError(
                "argv tokens must be strings",
                source_type=type(token).__name__,
                details=f"at position {index}",
            )
    return tokens


def parse_args(
    argv: Sequence[str] | str | None = None,
    *,
    config: ParserConfig | None = None,
    cache: bool = True,
) -> ParseResult:
    """Parse invocation tokens into long options, short options and positionals.

    Args:
        argv: Tokens without the program name, a single string split on the
            configured separator, or None to read sys.argv
        config: Parsing options (default: ParserConfig())
        cache: Store the result for later get_boolean calls (default: True)

    Returns:
        ParseResult. With cache=True the same object is stored, so later
        changes to it are seen by get_boolean; pass a copy (or
        cache=False) to keep them apart.

    Raises:
        ArgumentSourceError: argv is not one of the accepted shapes
    """
    config = (config or ParserConfig()).validate()
    tokens = _resolve_tokens(argv, config)
    logger.debug(f"Parsing {len(tokens)} tokens: {tokens}")

    joined = join_escaped(
        tokens, escape_marker=config.escape_marker, flush_trailing=config.flush_trailing_join
    )
    result = classify(joined)

    if cache:
        get_cache().store(result)
    return result
