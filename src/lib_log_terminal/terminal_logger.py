"""Terminal logger holding configuration and per-id state.

Purpose
-------
Expose :class:`TerminalLogger`, the object host code (or the stdlib bridge, or
the runtime façade) hands structured events to. It owns the terminal adapter,
the minimum level, the justification column, the ``show_limited`` flag, the
metadata formatter, the ``maxlog`` table, the progress tracker and the sticky
manager.

Contents
--------
* :class:`TerminalLogger` - composition of the domain, use cases and adapters.
* :func:`coerce_level` - level names or enum members to :class:`LogLevel`.

System Role
-----------
Composition point for one logger instance. Every collaborator can be replaced
through keyword arguments; the defaults are the Rich-backed adapters.
"""

from __future__ import annotations

import threading
from typing import IO, Any

from rich.console import Console

from .adapters.console.rich_console import RichTerminalAdapter
from .adapters.progress_bar import RichProgressRenderer
from .adapters.rate_limiter import MessageLimiter
from .adapters.sticky import StickyMessages
from .adapters.value_renderer import PrettyValueRenderer
from .application.ports import (
    MetadataFormatter,
    ProgressRendererPort,
    RateLimiterPort,
    StickyMessagesPort,
    TerminalPort,
    ValueRendererPort,
)
from .application.use_cases import (
    HandleResult,
    LineLayout,
    ProgressTracker,
    create_handle_log_event,
)
from .domain import LogEvent, LogLevel, default_metadata_formatter
from .domain.events import LineInfo


def coerce_level(level: str | int | LogLevel) -> LogLevel:
    """Normalise level inputs (name, number or enum) into :class:`LogLevel`.

    >>> coerce_level("warn") is LogLevel.WARNING
    True
    >>> coerce_level(5) is LogLevel.PROGRESS
    True
    """
    if isinstance(level, LogLevel):
        return level
    if isinstance(level, int):
        return LogLevel.from_numeric(level)
    return LogLevel.from_name(level)


def _coerce_terminal(
    stream: Console | TerminalPort | IO[str] | None,
    *,
    force_color: bool,
    no_color: bool,
) -> TerminalPort:
    if isinstance(stream, Console):
        return RichTerminalAdapter(console=stream)
    if isinstance(stream, TerminalPort):
        return stream
    return RichTerminalAdapter(stream=stream, force_color=force_color, no_color=no_color)


class TerminalLogger:
    """Logger with formatting optimised for reading in a text console.

    Events below ``min_level`` are filtered out. ``meta_formatter`` maps the
    event identity to ``(color, prefix, suffix)``; ``show_limited`` elides
    large values so they fit on screen; ``right_justify`` is the column the
    location suffix is aligned to, ``0`` placing it on its own line.

    Examples
    --------
    >>> from io import StringIO
    >>> console = Console(file=StringIO(), width=60, height=20, color_system=None)
    >>> log = TerminalLogger(console)
    >>> log.log(LogLevel.INFO, "hello", event_id="doc-1", answer=42)["route"]
    'console'
    >>> print(console.file.getvalue(), end="")
    ┌ Info: hello
    └   answer = 42
    """

    def __init__(
        self,
        stream: Console | TerminalPort | IO[str] | None = None,
        min_level: str | int | LogLevel = LogLevel.PROGRESS,
        *,
        meta_formatter: MetadataFormatter = default_metadata_formatter,
        show_limited: bool = True,
        right_justify: int = 0,
        force_color: bool = False,
        no_color: bool = False,
        sticky_messages: StickyMessagesPort | None = None,
        value_renderer: ValueRendererPort | None = None,
        progress_renderer: ProgressRendererPort | None = None,
        rate_limiter: RateLimiterPort | None = None,
    ) -> None:
        if right_justify < 0:
            raise ValueError(f"right_justify must be >= 0, got {right_justify}")
        self._terminal = _coerce_terminal(stream, force_color=force_color, no_color=no_color)
        self._min_level = coerce_level(min_level)
        self._meta_formatter = meta_formatter
        self._show_limited = show_limited
        self._right_justify = right_justify
        self._sticky = sticky_messages if sticky_messages is not None else StickyMessages(self._terminal)
        self._rate_limiter = rate_limiter if rate_limiter is not None else MessageLimiter()
        if progress_renderer is None:
            if not isinstance(self._terminal, RichTerminalAdapter):
                raise TypeError("a progress_renderer is required when stream is not a Rich console")
            progress_renderer = RichProgressRenderer(self._terminal)
        self._layout = LineLayout(
            terminal=self._terminal,
            meta_formatter=meta_formatter,
            value_renderer=value_renderer if value_renderer is not None else PrettyValueRenderer(),
            show_limited=show_limited,
            right_justify=right_justify,
        )
        self._tracker = ProgressTracker(
            renderer=progress_renderer,
            sticky=self._sticky,
            terminal=self._terminal,
        )
        self._lock = threading.RLock()
        self._handle = create_handle_log_event(
            layout=self._layout,
            tracker=self._tracker,
            sticky=self._sticky,
            rate_limiter=self._rate_limiter,
            lock=self._lock,
        )

    @property
    def min_enabled_level(self) -> LogLevel:
        return self._min_level

    @property
    def right_justify(self) -> int:
        return self._right_justify

    @property
    def show_limited(self) -> bool:
        return self._show_limited

    @property
    def meta_formatter(self) -> MetadataFormatter:
        return self._meta_formatter

    @property
    def terminal(self) -> TerminalPort:
        return self._terminal

    @property
    def sticky_messages(self) -> StickyMessagesPort:
        return self._sticky

    def should_log(self, event_id: str) -> bool:
        """Return ``False`` once ``event_id`` has used up its ``maxlog`` budget."""

        with self._lock:
            return self._rate_limiter.should_log(event_id)

    def is_enabled(self, level: LogLevel) -> bool:
        return level >= self._min_level

    def progress_active(self, event_id: str) -> bool:
        """Return ``True`` while a progress bar is tracked for ``event_id``."""

        with self._lock:
            return event_id in self._tracker

    def handle(self, event: LogEvent) -> HandleResult:
        """Filter, then render and write ``event``.

        Returns a diagnostic dictionary: ``{"ok": True, "route": ...}`` where
        the route is ``"console"``, ``"sticky"`` or ``"progress"``, or
        ``{"ok": False, "reason": ...}`` for ``"below_level"`` and
        ``"rate_limited"`` events.
        """

        if not self.is_enabled(event.level):
            return {"ok": False, "reason": "below_level", "event_id": event.event_id}
        with self._lock:
            if not self._rate_limiter.should_log(event.event_id):
                return {"ok": False, "reason": "rate_limited", "event_id": event.event_id}
            return self._handle(event)

    def log(
        self,
        level: str | int | LogLevel,
        message: Any,
        *,
        event_id: str,
        scope: str | None = None,
        group: str | None = None,
        file: str | None = None,
        line: LineInfo = None,
        maxlog: int | None = None,
        progress: float | str | None = None,
        sticky: bool | str | None = None,
        **pairs: Any,
    ) -> HandleResult:
        """Build a :class:`LogEvent` from keyword arguments and handle it."""

        event = LogEvent(
            level=coerce_level(level),
            message=message,
            event_id=event_id,
            scope=scope,
            group=group,
            file=file,
            line=line,
            pairs=tuple(pairs.items()),
            maxlog=maxlog,
            progress=progress,
            sticky=sticky,
        )
        return self.handle(event)


__all__ = ["TerminalLogger", "coerce_level"]
