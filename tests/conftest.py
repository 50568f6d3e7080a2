from __future__ import annotations

from io import StringIO
from typing import Iterator

import pytest
from rich.console import Console

from lib_log_terminal import runtime
from lib_log_terminal.adapters.console.rich_console import RichTerminalAdapter


class FakeTerminal:
    """In-memory terminal port recording writes."""

    def __init__(self, *, rows: int = 24, columns: int = 80, is_terminal: bool = True) -> None:
        self.rows = rows
        self.columns = columns
        self.is_terminal = is_terminal
        self.writes: list[str] = []

    def dimensions(self) -> tuple[int, int]:
        return self.rows, self.columns

    def render(self, segments) -> str:
        return "".join(text for text, _style in segments)

    def write(self, text: str) -> None:
        self.writes.append(text)

    @property
    def output(self) -> str:
        return "".join(self.writes)


def make_console(*, width: int = 80, height: int = 24, terminal: bool = False) -> Console:
    return Console(
        file=StringIO(),
        width=width,
        height=height,
        color_system=None,
        force_terminal=terminal,
        legacy_windows=False,
    )


@pytest.fixture
def plain_console() -> Console:
    """80x24 colourless console writing to a ``StringIO``; not a terminal."""

    return make_console()


@pytest.fixture
def tty_console() -> Console:
    """80x24 colourless console that reports itself as a terminal."""

    return make_console(terminal=True)


@pytest.fixture
def plain_terminal(plain_console: Console) -> RichTerminalAdapter:
    return RichTerminalAdapter(console=plain_console)


@pytest.fixture
def fake_terminal() -> FakeTerminal:
    return FakeTerminal()


@pytest.fixture(autouse=True)
def _reset_runtime() -> Iterator[None]:
    """Ensure no test leaks the process-wide runtime into the next one."""

    yield
    if runtime.is_initialised():
        runtime.shutdown()


@pytest.fixture
def make_fake_terminal():
    """Factory for :class:`FakeTerminal` instances with custom geometry."""

    return FakeTerminal


class FakeSticky:
    """Sticky manager double recording every call in order."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, ...]] = []
        self.messages: dict[str, str] = {}

    def upsert(self, event_id: str, text: str) -> None:
        self.calls.append(("upsert", event_id, text))
        self.messages[event_id] = text

    def remove(self, event_id: str) -> None:
        self.calls.append(("remove", event_id))
        self.messages.pop(event_id, None)

    def write(self, text: str) -> None:
        self.calls.append(("write", text))

    def clear(self) -> None:
        self.calls.append(("clear",))
        self.messages.clear()


@pytest.fixture
def fake_sticky() -> FakeSticky:
    return FakeSticky()
