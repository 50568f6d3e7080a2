from __future__ import annotations

import math
from io import StringIO

import pytest
from rich.console import Console

from lib_log_terminal.adapters.console.rich_console import RichTerminalAdapter
from lib_log_terminal.adapters.progress_bar import RichProgressRenderer, format_duration
from lib_log_terminal.domain.width import visible_width


class _Clock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def test_running_bar_shows_percentage_and_eta(plain_terminal) -> None:
    clock = _Clock()
    renderer = RichProgressRenderer(plain_terminal, clock=clock)
    state = renderer.create()
    clock.now += 10

    line = renderer.render(state, "Copy ", 0.5, width=80)

    assert line.startswith("Copy ")
    assert line.endswith(" 50%  ETA: 0:00:10")
    assert visible_width(line) <= 80
    assert state.fraction == 0.5


def test_finished_bar_shows_elapsed_time(plain_terminal) -> None:
    clock = _Clock()
    renderer = RichProgressRenderer(plain_terminal, clock=clock)
    state = renderer.create()
    clock.now += 65

    assert renderer.render(state, "Copy ", 1.0, width=80).endswith("100%  Time: 0:01:05")


def test_zero_progress_has_no_eta(plain_terminal) -> None:
    renderer = RichProgressRenderer(plain_terminal, clock=_Clock())
    line = renderer.render(renderer.create(), "Progress: ", 0.0, width=60)
    assert line.endswith("  0%  ETA: N/A")


def test_out_of_range_fractions_are_clamped(plain_terminal) -> None:
    renderer = RichProgressRenderer(plain_terminal, clock=_Clock())
    state = renderer.create()

    assert renderer.render(state, "", 7.0, width=60).endswith("100%  Time: 0:00:00")
    assert renderer.render(state, "", math.nan, width=60).endswith("  0%  ETA: N/A")
    assert renderer.render(state, "", -1, width=60).endswith("  0%  ETA: N/A")


def test_narrow_terminals_keep_a_minimum_bar(plain_terminal) -> None:
    renderer = RichProgressRenderer(plain_terminal, clock=_Clock())
    line = renderer.render(renderer.create(), "A very long label ", 1.0, width=10)
    assert "━" in line


def test_format_duration_handles_hours() -> None:
    assert format_duration(0) == "0:00:00"
    assert format_duration(59.6) == "0:01:00"
    assert format_duration(7322) == "2:02:02"


@pytest.mark.parametrize("fraction", [0.0, 0.5])
def test_colourless_bar_fills_requested_width(tty_console: Console, fraction: float) -> None:
    renderer = RichProgressRenderer(RichTerminalAdapter(console=tty_console), clock=_Clock())

    line = renderer.render(renderer.create(), "Copy ", fraction, width=60)

    assert visible_width(line) == 59


def test_percentage_column_stays_put_without_colour() -> None:
    console = Console(file=StringIO(), width=80, force_terminal=True, no_color=True, legacy_windows=False)
    renderer = RichProgressRenderer(RichTerminalAdapter(console=console), clock=_Clock())
    state = renderer.create()

    lines = [renderer.render(state, "Copy ", fraction, width=60) for fraction in (0.0, 0.3, 0.9)]
    columns = {visible_width(line[: line.index("%")]) for line in lines}

    assert len(columns) == 1
