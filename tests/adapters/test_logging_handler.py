from __future__ import annotations

import logging
from typing import Iterator

import pytest
from rich.console import Console

from lib_log_terminal import TerminalLogger
from lib_log_terminal.adapters.logging_handler import TerminalLogHandler, event_from_record
from lib_log_terminal.domain import LogLevel


@pytest.fixture
def bridged(plain_console: Console) -> Iterator[tuple[logging.Logger, Console, TerminalLogger]]:
    terminal_logger = TerminalLogger(plain_console)
    handler = TerminalLogHandler(terminal_logger)
    std_logger = logging.getLogger("tests.bridge")
    std_logger.setLevel(logging.DEBUG)
    std_logger.propagate = False
    std_logger.addHandler(handler)
    try:
        yield std_logger, plain_console, terminal_logger
    finally:
        std_logger.removeHandler(handler)
        std_logger.propagate = True


def test_records_render_with_key_value_pairs(bridged) -> None:
    std_logger, console, _ = bridged

    std_logger.warning("disk %s", "full", extra={"kv": {"free": 0}})

    output = console.file.getvalue()
    assert output.startswith("┌ Warning: disk full\n│   free = 0\n└ ")
    assert "@ tests.bridge " in output


def test_exc_info_becomes_exception_pair(bridged) -> None:
    std_logger, console, _ = bridged

    try:
        raise ValueError("boom")
    except ValueError:
        std_logger.exception("failed")

    output = console.file.getvalue()
    assert "Error: failed" in output
    assert "exception =" in output
    assert "ValueError: boom" in output


def test_progress_extra_drives_progress_bars(bridged) -> None:
    std_logger, console, terminal_logger = bridged

    std_logger.info("Copy", extra={"progress": 0.5, "event_id": "copy"})

    assert terminal_logger.progress_active("copy")
    assert " 50%" in console.file.getvalue()


def test_own_records_are_ignored(plain_console: Console) -> None:
    handler = TerminalLogHandler(TerminalLogger(plain_console))
    record = logging.LogRecord("lib_log_terminal.adapters.sticky", logging.WARNING, __file__, 1, "x", None, None)

    handler.emit(record)

    assert plain_console.file.getvalue() == ""


def test_failures_are_reported_through_handle_error(monkeypatch: pytest.MonkeyPatch) -> None:
    class _Exploding:
        def handle(self, event):
            raise RuntimeError("render failed")

    handler = TerminalLogHandler(_Exploding())
    seen: list[logging.LogRecord] = []
    monkeypatch.setattr(handler, "handleError", seen.append)
    record = logging.LogRecord("app", logging.INFO, __file__, 1, "x", None, None)

    handler.emit(record)

    assert seen == [record]


def test_event_translation_maps_levels_and_ids() -> None:
    record = logging.LogRecord("app", 25, "/src/pkg/mod.py", 7, "msg", None, None)
    record.maxlog = 2
    record.sticky = True

    event = event_from_record(record)

    assert event.level is LogLevel.INFO
    assert event.event_id == "app:/src/pkg/mod.py:7"
    assert event.group == "mod"
    assert event.file == "/src/pkg/mod.py"
    assert event.line == 7
    assert event.maxlog == 2
    assert event.is_sticky
