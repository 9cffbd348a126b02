"""Data model for parsed command lines."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

# True marks a flag given without a value; a str is an explicit value.
OptionValue = str | Literal[True]


@dataclass
class ParseResult:
    """Structured view of one command line.

    Attributes:
        long: "--name" / "--name=value" options, last occurrence wins
        short: "-k=value" / "-abc" options keyed by single character, last occurrence wins
        opts: Positional arguments in input order, duplicates kept
    """

    long: dict[str, OptionValue] = field(default_factory=dict)
    short: dict[str, OptionValue] = field(default_factory=dict)
    opts: list[str] = field(default_factory=list)

    def lookup(self, key: str) -> OptionValue | None:
        """Find key among long options first, then short options."""
        if key in self.long:
            return self.long[key]
        if key in self.short:
            return self.short[key]
        return None

    def to_dict(self) -> dict[str, Any]:
        """Return the {"long", "short", "opts"} mapping shape (copies)."""
        return {
            "long": dict(self.long),
            "short": dict(self.short),
            "opts": list(self.opts),
        }
