"""Tests for the command-line tool"""
import json
import sys
from unittest.mock import patch

import pytest

from cmdline_args.api import get_boolean
from cmdline_args.cli.main import format_text, main
from cmdline_args.cli.parser import parse_arguments, split_argv
from cmdline_args.parsing.models import ParseResult


class TestCLIArguments:
    """Test the tool's own argument parsing"""

    def test_tokens_after_separator(self):
        args = parse_arguments(["--format", "json", "--", "--foo", "-abc", "x"])
        assert args.format == "json"
        assert args.tokens == ["--foo", "-abc", "x"]

    def test_plain_positionals_without_separator(self):
        args = parse_arguments(["a", "b"])
        assert args.tokens == ["a", "b"]
        assert args.format == "text"

    def test_positionals_on_both_sides(self):
        args = parse_arguments(["a", "--", "--b"])
        assert args.tokens == ["a", "--b"]

    def test_only_first_separator_splits(self):
        assert split_argv(["--format", "json", "--", "x", "--", "y"]) == (["--format", "json"], ["x", "--", "y"])

    def test_bool_keys_repeatable(self):
        args = parse_arguments(["--bool", "a", "--bool", "b=yes"])
        assert args.bool_keys == ["a", "b=yes"]

    def test_log_level_case_insensitive(self):
        assert parse_arguments(["--log-level", "debug"]).log_level == "DEBUG"

    def test_reads_sys_argv(self):
        with patch.object(sys, "argv", ["cmdline-args", "--flush-trailing-join", "--", "x\\"]):
            args = parse_arguments()
        assert args.flush_trailing_join is True
        assert args.tokens == ["x\\"]

    def test_invalid_format_exits(self):
        with pytest.raises(SystemExit) as exc_info:
            parse_arguments(["--format", "yaml"])
        assert exc_info.value.code == 2


class TestFormatText:
    """Test the sectioned text output"""

    def test_sections(self):
        text = format_text(ParseResult(long={"foo": True, "bar": "baz"}, short={"a": True}, opts=["arg1"]))
        lines = text.splitlines()
        assert lines[0] == "[long]"
        assert "'foo'" in lines[1] and lines[1].endswith("=> true")
        assert "'bar'" in lines[2] and lines[2].endswith('=> "baz"')
        assert lines[3] == "[short]"
        assert "'a'" in lines[4] and lines[4].endswith("=> true")
        assert lines[5] == "[opts]"
        assert lines[6].startswith("  [0]") and lines[6].endswith('=> "arg1"')

    def test_empty_result(self):
        assert format_text(ParseResult()) == "[long]\n[short]\n[opts]"


class TestMain:
    """Test the main entry point end to end"""

    def test_json_output(self, capsys):
        assert main(["--format", "json", "--", "--foo", "--bar=baz", "-abc", "-k=value", "arg1"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload == {
            "long": {"foo": True, "bar": "baz"},
            "short": {"a": True, "b": True, "c": True, "k": "value"},
            "opts": ["arg1"],
        }

    def test_text_output(self, capsys):
        assert main(["arg1", "arg2"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("[long]\n[short]\n[opts]\n")
        assert '=> "arg2"' in out

    def test_escaped_tokens_joined(self, capsys):
        main(["--format", "json", "--", "Jan\\", "Kowalski"])
        assert json.loads(capsys.readouterr().out)["opts"] == ["Jan Kowalski"]

    def test_flush_trailing_join_option(self, capsys):
        main(["--format", "json", "--flush-trailing-join", "--", "a", "b\\"])
        assert json.loads(capsys.readouterr().out)["opts"] == ["a", "b"]

    def test_bool_lookups(self, capsys):
        main(["--bool", "flag", "--bool", "missing=yes", "--bool", "v", "--", "--flag=off", "-v"])
        out_lines = capsys.readouterr().out.splitlines()
        assert out_lines[-3:] == ["flag=false", "missing=true", "v=true"]

    def test_result_left_in_cache(self, capsys):
        main(["--", "--debug=on"])
        assert get_boolean("debug") is True

    def test_environment_configuration(self, capsys, monkeypatch):
        monkeypatch.setenv("CMDLINE_ARGS_ESCAPE_MARKER", "^")
        main(["--format", "json", "--", "Jan^", "Kowalski"])
        assert json.loads(capsys.readouterr().out)["opts"] == ["Jan Kowalski"]

    def test_loads_dotenv(self, capsys):
        with patch("cmdline_args.cli.main.load_dotenv") as mock_load:
            main(["x"])
        mock_load.assert_called_once()

    def test_invalid_bool_default_exits_one(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--bool", "flag=maybe", "--", "--flag"])
        assert exc_info.value.code == 1
        assert "ERROR: Invalid default for --bool flag" in capsys.readouterr().err

    def test_empty_escape_marker_exits_one(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--escape-marker", "", "x"])
        assert exc_info.value.code == 1
        assert "Escape marker cannot be empty" in capsys.readouterr().err

    def test_invalid_environment_exits_one(self, capsys, monkeypatch):
        monkeypatch.setenv("CMDLINE_ARGS_FLUSH_TRAILING_JOIN", "sometimes")
        with pytest.raises(SystemExit) as exc_info:
            main(["x"])
        assert exc_info.value.code == 1

    def test_stdout_free_of_log_lines(self, capsys):
        main(["--log-level", "DEBUG", "--format", "json", "--", "--password=hunter2"])
        captured = capsys.readouterr()
        json.loads(captured.out)
        assert "hunter2" not in captured.err
