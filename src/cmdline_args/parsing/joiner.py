"""Re-join tokens that a shell split on escaped spaces.

"Jan\\ Kowalski" typed unquoted can reach the program as ["Jan\\", "Kowalski"];
a token ending in the escape marker is glued to the next one with a space.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cmdline_args.core.constants import DEFAULT_ESCAPE_MARKER

logger = logging.getLogger(__name__)


def join_escaped(
    tokens: Iterable[str],
    *,
    escape_marker: str = DEFAULT_ESCAPE_MARKER,
    flush_trailing: bool = False,
) -> list[str]:
    """Merge every token ending in escape_marker with the token that follows it.

    Args:
        tokens: Raw invocation tokens, program name excluded
        escape_marker: Trailing marker requesting a join
        flush_trailing: Emit a join still open at end of input (without its
            trailing space) instead of dropping it

    Returns:
        Joined tokens; never longer than the input
    """
    joined: list[str] = []
    pending = ""

    for token in tokens:
        if token.endswith(escape_marker):
            pending += token[: -len(escape_marker)] + " "
        elif pending:
            joined.append(pending + token)
            pending = ""
        else:
            joined.append(token)

    if pending:
        if flush_trailing:
            joined.append(pending[:-1])
        else:
            logger.warning(f"Dropping unterminated escaped token at end of input: {pending[:-1]!r}")

    return joined
