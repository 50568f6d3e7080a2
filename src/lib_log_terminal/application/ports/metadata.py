"""Callable contract for metadata formatters."""

from __future__ import annotations

from typing import Any, Protocol

from lib_log_terminal.domain.events import LineInfo
from lib_log_terminal.domain.levels import LogLevel


class MetadataFormatter(Protocol):
    """Return ``(color, prefix, suffix)`` for the identity of an event."""

    def __call__(
        self,
        level: LogLevel,
        scope: Any,
        group: Any,
        event_id: Any,
        file: str | None,
        line: LineInfo,
    ) -> tuple[str, str, str]: ...


__all__ = ["MetadataFormatter"]
