"""Port for the sticky-message manager that redraws lines in place."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class StickyMessagesPort(Protocol):
    """Keyed store of messages kept at the bottom of the terminal."""

    def upsert(self, event_id: str, text: str) -> None:
        """Install or replace the message shown for ``event_id``."""

    def remove(self, event_id: str) -> None:
        """Drop the message for ``event_id``; unknown ids are ignored."""

    def write(self, text: str) -> None:
        """Write ``text`` permanently above the sticky block."""

    def clear(self) -> None:
        """Erase every sticky message from the terminal."""


__all__ = ["StickyMessagesPort"]
