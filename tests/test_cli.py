"""Tests for the CLI entry point."""

from io import StringIO
from unittest.mock import patch

import pytest

from extidy.cli import main
from extidy.config import ExtidyConfig


def _run(stdin: str, config=None):
    if config is None:
        config = ExtidyConfig()
    with patch("sys.stdin", StringIO(stdin)):
        with patch("extidy.cli.load_config", return_value=config):
            main()


def test_empty_stdin_exits_1(capsys):
    with patch("sys.stdin", StringIO("")):
        with pytest.raises(SystemExit) as exc_info:
            main()
    assert exc_info.value.code == 1
    assert "no statements provided" in capsys.readouterr().err


def test_whitespace_stdin_exits_1():
    with patch("sys.stdin", StringIO("   \n  ")):
        with pytest.raises(SystemExit) as exc_info:
            main()
    assert exc_info.value.code == 1


def test_parse_error_exits_1(capsys):
    with pytest.raises(SystemExit) as exc_info:
        _run("int = ;\n")
    assert exc_info.value.code == 1
    assert "extidy: cannot parse statements at line 1" in capsys.readouterr().err


def test_writes_tidied_statements(capsys):
    _run("int a;\nint b;\nConsole.Write();\n")
    assert capsys.readouterr().out == "int a, b;\nConsole.Write();\n"


def test_unchanged_input_echoed(capsys):
    source = "Run();\n// done\n"
    _run(source)
    assert capsys.readouterr().out == source


def test_messages_and_summary_on_stderr(capsys):
    _run("{\n    int x;\n    x = Compute();\n    return x;\n}\n")
    captured = capsys.readouterr()
    assert captured.out == "\n    return Compute();\n\n"
    assert "RemoveRedundantBlock: unwrapped block of 3 statement(s)" in captured.err
    assert "--- extidy summary ---" in captured.err
    assert "statements: 1 in, 1 out" in captured.err


def test_config_controls_rewrites(capsys):
    config = ExtidyConfig(disabled_rewrites=["merge_declarations"])
    source = "int a;\nint b;\n"
    _run(source, config)
    assert capsys.readouterr().out == source


def test_unknown_log_level_falls_back(capsys):
    _run("int a;\nint b;\n", ExtidyConfig(log_level="LOUD"))
    captured = capsys.readouterr()
    assert captured.out == "int a, b;\n"
    assert "extidy: unknown log_level 'LOUD'; using WARNING" in captured.err


def test_log_level_is_case_insensitive(capsys):
    _run("Run();\n", ExtidyConfig(log_level="debug"))
    assert "unknown log_level" not in capsys.readouterr().err
