from __future__ import annotations

from typing import Any

from lib_log_terminal.adapters.rate_limiter import MessageLimiter
from lib_log_terminal.application.use_cases import LineLayout, ProgressTracker, create_handle_log_event
from lib_log_terminal.domain import DONE, LogEvent, LogLevel, default_metadata_formatter


class _StrRenderer:
    def render(self, value: Any, *, width: int, rows: int, limited: bool) -> str:
        return str(value)


class _BarRenderer:
    def create(self) -> object:
        return object()

    def render(self, state, label: str, fraction: float, *, width: int) -> str:
        return f"{label}{fraction:.0%}"


def _pipeline(terminal, sticky, *, right_justify: int = 0):
    layout = LineLayout(
        terminal=terminal,
        meta_formatter=default_metadata_formatter,
        value_renderer=_StrRenderer(),
        right_justify=right_justify,
    )
    tracker = ProgressTracker(renderer=_BarRenderer(), sticky=sticky, terminal=terminal)
    handle = create_handle_log_event(layout=layout, tracker=tracker, sticky=sticky, rate_limiter=MessageLimiter())
    return handle, tracker


def _event(**fields: Any) -> LogEvent:
    base = {"level": LogLevel.INFO, "message": "hello", "event_id": "site"}
    base.update(fields)
    return LogEvent(**base)


def test_plain_event_is_written_permanently(fake_terminal, fake_sticky) -> None:
    handle, _ = _pipeline(fake_terminal, fake_sticky)

    result = handle(_event())

    assert result == {"ok": True, "route": "console", "event_id": "site"}
    assert fake_sticky.calls == [("write", "[ Info: hello\n")]


def test_maxlog_suppresses_without_side_effects(fake_terminal, fake_sticky) -> None:
    handle, _ = _pipeline(fake_terminal, fake_sticky)

    results = [handle(_event(maxlog=2)) for _ in range(3)]

    assert [result["ok"] for result in results] == [True, True, False]
    assert results[-1]["reason"] == "rate_limited"
    assert len(fake_sticky.calls) == 2


def test_maxlog_is_tracked_per_id(fake_terminal, fake_sticky) -> None:
    handle, _ = _pipeline(fake_terminal, fake_sticky)

    assert handle(_event(event_id="a", maxlog=1))["ok"] is True
    assert handle(_event(event_id="b", maxlog=1))["ok"] is True
    assert handle(_event(event_id="a", maxlog=1))["ok"] is False


def test_sticky_event_replaces_previous_text(fake_terminal, fake_sticky) -> None:
    handle, _ = _pipeline(fake_terminal, fake_sticky)

    handle(_event(message="one", sticky=True))
    result = handle(_event(message="two", sticky=True))

    assert result["route"] == "sticky"
    assert fake_sticky.messages == {"site": "[ Info: two\n"}


def test_sticky_done_shows_final_text_then_releases_slot(fake_terminal, fake_sticky) -> None:
    handle, _ = _pipeline(fake_terminal, fake_sticky)
    handle(_event(message="working", sticky=True))
    fake_sticky.calls.clear()

    handle(_event(message="finished", sticky=DONE))

    assert fake_sticky.calls == [("upsert", "site", "[ Info: finished\n"), ("remove", "site")]
    assert fake_sticky.messages == {}


def test_progress_events_are_routed_to_the_tracker(fake_terminal, fake_sticky) -> None:
    handle, tracker = _pipeline(fake_terminal, fake_sticky)

    result = handle(_event(message="Copy", progress=0.5))

    assert result["route"] == "progress"
    assert result["drawn"] is True
    assert "site" in tracker
    assert fake_sticky.calls == [("upsert", "site", "Copy 50%")]


def test_progress_takes_precedence_over_sticky(fake_terminal, fake_sticky) -> None:
    handle, _ = _pipeline(fake_terminal, fake_sticky)

    assert handle(_event(progress=0.1, sticky=True))["route"] == "progress"


def test_warning_with_zero_justify_puts_location_on_last_line(fake_terminal, fake_sticky) -> None:
    handle, _ = _pipeline(fake_terminal, fake_sticky)

    handle(_event(level=LogLevel.WARNING, scope="mod", file="f.py", line=9))

    assert fake_sticky.calls == [("write", "┌ Warning: hello\n└ @ mod f.py:9\n")]
