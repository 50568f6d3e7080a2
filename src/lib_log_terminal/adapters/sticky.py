"""Sticky messages kept redrawn at the bottom of the terminal.

Purpose
-------
Maintain an ordered ``id -> text`` block beneath regular output. Every change,
and every permanent write, erases the block, emits the new content and draws
the block again so the sticky lines always stay last.

Contents
--------
* :func:`count_terminal_lines` - rows occupied by text once soft wrapped.
* :class:`StickyMessages` - implementation of :class:`StickyMessagesPort`.

System Role
-----------
Shared by the event use case and the progress tracker. On streams that are
not terminals no cursor control is emitted: sticky updates are printed as
ordinary lines and removals do nothing.
"""

from __future__ import annotations

import logging
import threading

from lib_log_terminal.application.ports.console import TerminalPort
from lib_log_terminal.application.ports.sticky import StickyMessagesPort
from lib_log_terminal.domain.width import visible_width

logger = logging.getLogger(__name__)

CSI = "\x1b["


def count_terminal_lines(block: str, columns: int) -> int:
    """Return how many terminal rows ``block`` fills.

    ``block`` must end with a newline; long lines count once per wrapped row.

    >>> count_terminal_lines("ab\\ncd\\n", 80)
    2
    >>> count_terminal_lines("x" * 100 + "\\n", 40)
    3
    """

    columns = max(1, columns)
    rows = 0
    for line in block.split("\n")[:-1]:
        width = visible_width(line)
        rows += max(1, -(-width // columns))
    return rows


def _terminated(text: str) -> str:
    return text if text.endswith("\n") else text + "\n"


class StickyMessages(StickyMessagesPort):
    """Redraw-in-place message block for an interactive terminal."""

    def __init__(self, terminal: TerminalPort) -> None:
        self._terminal = terminal
        self._messages: dict[str, str] = {}
        self._drawn_rows = 0
        self._lock = threading.RLock()

    def __contains__(self, event_id: object) -> bool:
        return event_id in self._messages

    def __len__(self) -> int:
        return len(self._messages)

    @property
    def messages(self) -> dict[str, str]:
        """Return a copy of the current ``id -> text`` block."""

        with self._lock:
            return dict(self._messages)

    def upsert(self, event_id: str, text: str) -> None:
        with self._lock:
            if not self._terminal.is_terminal:
                self._terminal.write(text.rstrip() + "\n")
                return
            erase = self._erase_sequence()
            self._messages[event_id] = text
            self._terminal.write(erase + self._draw_block())

    def remove(self, event_id: str) -> None:
        with self._lock:
            if event_id not in self._messages:
                return
            erase = self._erase_sequence()
            del self._messages[event_id]
            self._terminal.write(erase + self._draw_block())
            logger.debug("released sticky slot %s", event_id)

    def write(self, text: str) -> None:
        with self._lock:
            if not self._messages and not self._drawn_rows:
                self._terminal.write(text)
                return
            erase = self._erase_sequence()
            self._terminal.write(erase + text + self._draw_block())

    def clear(self) -> None:
        with self._lock:
            erase = self._erase_sequence()
            self._messages.clear()
            if erase:
                self._terminal.write(erase)

    def _erase_sequence(self) -> str:
        if not self._drawn_rows:
            return ""
        rows = self._drawn_rows
        self._drawn_rows = 0
        return f"\r{CSI}{rows}A{CSI}J"

    def _draw_block(self) -> str:
        if not self._messages:
            return ""
        block = "".join(_terminated(text) for text in self._messages.values())
        _rows, columns = self._terminal.dimensions()
        self._drawn_rows = count_terminal_lines(block, columns)
        return block


__all__ = ["StickyMessages", "count_terminal_lines"]
