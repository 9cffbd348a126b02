"""Boolean coercion of option values."""

from __future__ import annotations

from cmdline_args.core.constants import FALSY_LITERALS, TRUTHY_LITERALS
from cmdline_args.parsing.cache import get_cache
from cmdline_args.parsing.models import ParseResult

BOOLEAN_LITERALS: dict[str, bool] = {
    **{literal: True for literal in TRUTHY_LITERALS},
    **{literal: False for literal in FALSY_LITERALS},
}


def coerce_bool(value: object, default: bool = False) -> bool:
    """Map a flag value to a strict boolean.

    bool is returned as-is, int by truthiness, str through the
    yes/no, on/off, true/false, 1/0, y/n table (case-insensitive).
    Unknown strings and any other type give default.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        return BOOLEAN_LITERALS.get(value.lower(), default)
    return default


def get_boolean(key: str, default: bool = False, *, result: ParseResult | None = None) -> bool:
    """Look up key in a parse result and coerce its value to bool.

    Args:
        key: Option name, searched among long options then short options
        default: Returned when the key is missing or its value is not a known literal
        result: Result to read; the last result stored by parse_args when omitted

    Returns:
        bool
    """
    if result is None:
        result = get_cache().get()
        if result is None:
            return default

    value = result.lookup(key)
    if value is None:
        return default
    return coerce_bool(value, default)
