"""Sort joined tokens into long options, short options and positionals."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cmdline_args.core.constants import LONG_PREFIX, QUOTE_CHARS, SHORT_PREFIX, VALUE_SEPARATOR
from cmdline_args.parsing.models import ParseResult

logger = logging.getLogger(__name__)


def strip_quotes(value: str) -> str:
    """Remove one matching pair of double quotes, then one of single quotes.

    Only one layer of each kind goes: ""x"" becomes "x".
    """
    for quote in QUOTE_CHARS:
        if len(value) >= 2 and value[0] == quote and value[-1] == quote:
            value = value[1:-1]
    return value


def classify(tokens: Iterable[str]) -> ParseResult:
    """
    Bucket each token, first matching rule wins:

    1. ``--name``         -> long[name] = True
    2. ``--name=value``   -> long[name] = value (split on the first "=")
    3. ``-k=value``       -> short[k] = value ("=" must be the third character)
    4. ``-abc``           -> short[a] = short[b] = short[c] = True
    5. anything else      -> appended to opts

    Values are quote-stripped; later keys overwrite earlier ones. Every
    string is accepted, including "-" (adds nothing) and "--=x" (empty key).
    """
    result = ParseResult()

    for token in tokens:
        if token.startswith(LONG_PREFIX):
            body = token[len(LONG_PREFIX):]
            key, sep, value = body.partition(VALUE_SEPARATOR)
            result.long[key] = strip_quotes(value) if sep else True

        elif token.startswith(SHORT_PREFIX):
            if token[2:3] == VALUE_SEPARATOR:
                result.short[token[1]] = strip_quotes(token[3:])
            else:
                for char in token[1:]:
                    result.short[char] = True

        else:
            result.opts.append(token)

    logger.debug(
        f"Classified tokens: {len(result.long)} long, {len(result.short)} short, {len(result.opts)} positional"
    )
    return result
