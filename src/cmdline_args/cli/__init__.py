"""CLI module - Command-line interface components."""

from cmdline_args.cli.main import format_text, main
from cmdline_args.cli.parser import build_parser, parse_arguments, split_argv

__all__ = [
    "build_parser",
    "format_text",
    "main",
    "parse_arguments",
    "split_argv",
]
