"""Package surface checks: exports, metadata banner and module entry point."""

from __future__ import annotations

import runpy

import pytest

import lib_log_terminal
from lib_log_terminal import __init__conf__
from lib_log_terminal.cli import summary_info


def test_public_names_are_exported() -> None:
    for name in lib_log_terminal.__all__:
        assert hasattr(lib_log_terminal, name), name


def test_version_matches_metadata() -> None:
    assert lib_log_terminal.__version__ == __init__conf__.version


def test_summary_info_contains_metadata() -> None:
    summary = summary_info()
    assert summary.startswith("Info for lib_log_terminal:\n")
    assert "shell_command" in summary
    assert summary.endswith("\n")


def test_summary_info_is_idempotent() -> None:
    assert summary_info() == summary_info()


def test_module_entry_point_runs_cli(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.argv", ["lib_log_terminal", "info"])

    with pytest.raises(SystemExit) as exit_info:
        runpy.run_module("lib_log_terminal", run_name="__main__")

    assert exit_info.value.code == 0
    assert "Info for lib_log_terminal" in capsys.readouterr().out
