"""Parsing module - joiner, classifier, result cache and boolean coercion."""

from cmdline_args.parsing.models import OptionValue, ParseResult
from cmdline_args.parsing.joiner import join_escaped
from cmdline_args.parsing.classifier import classify, strip_quotes
from cmdline_args.parsing.cache import ResultCache, get_cache
from cmdline_args.parsing.coercion import BOOLEAN_LITERALS, coerce_bool, get_boolean

__all__ = [
    "BOOLEAN_LITERALS",
    "OptionValue",
    "ParseResult",
    "ResultCache",
    "classify",
    "coerce_bool",
    "get_boolean",
    "get_cache",
    "join_escaped",
    "strip_quotes",
]
