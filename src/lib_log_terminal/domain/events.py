"""Domain event describing one structured terminal log call.

Purpose
-------
Provide an immutable representation of the fields a log call carries: level,
message, identity, source location, key/value pairs and the optional
``maxlog``/``progress``/``sticky`` directives.

Contents
--------
* :data:`DONE` sentinel shared by ``progress`` and ``sticky``.
* :class:`LogEvent` frozen dataclass with routing helpers.
* :class:`RenderedLine` named tuple produced by the layout engine.

System Role
-----------
Sits in the domain layer so the application use cases and adapters only ever
manipulate plain data objects.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, NamedTuple, Union

from .levels import LogLevel

DONE = "done"
"""Sentinel marking a finished progress bar or a sticky message to finalize."""

LineInfo = Union[int, range, tuple[int, int], None]


class RenderedLine(NamedTuple):
    """One output line of a rendered unit: indentation plus text."""

    indent: int
    text: str


@dataclass(slots=True, frozen=True)
class LogEvent:
    """Immutable log event handed to :class:`~lib_log_terminal.TerminalLogger`.

    Attributes
    ----------
    level:
        :class:`LogLevel` severity of the event.
    message:
        Message value; converted with :func:`str` when rendered.
    event_id:
        Stable identity of the call site, used for rate limiting and for
        correlating progress bars and sticky messages.
    scope / group:
        Optional origin (logger or module name) and group tag.
    file / line:
        Optional source location; ``line`` may be an ``int``, a ``range`` or a
        ``(first, last)`` tuple.
    pairs:
        Ordered key/value pairs; a mapping is converted on construction.
    maxlog:
        Optional ceiling on how many times this id is emitted.
    progress:
        Completion fraction or :data:`DONE`; routes the event to the progress
        tracker.
    sticky:
        ``True`` keeps the rendering redrawn in place, :data:`DONE` shows it one
        last time and releases the slot.
    """

    level: LogLevel
    message: Any
    event_id: str
    scope: str | None = None
    group: str | None = None
    file: str | None = None
    line: LineInfo = None
    pairs: tuple[tuple[str, Any], ...] = field(default_factory=tuple)
    maxlog: int | None = None
    progress: float | str | None = None
    sticky: bool | str | None = None

    def __post_init__(self) -> None:
        if not self.event_id:
            raise ValueError("event_id must not be empty")
        if isinstance(self.pairs, Mapping):
            pairs = tuple((str(key), value) for key, value in self.pairs.items())
        else:
            pairs = tuple((str(key), value) for key, value in self.pairs)
        object.__setattr__(self, "pairs", pairs)
        if isinstance(self.progress, str) and self.progress != DONE:
            raise ValueError(f"progress must be a number or {DONE!r}, got {self.progress!r}")
        if isinstance(self.sticky, str) and self.sticky != DONE:
            raise ValueError(f"sticky must be a bool or {DONE!r}, got {self.sticky!r}")

    @property
    def is_progress(self) -> bool:
        """Return ``True`` when the event carries a progress value.

        >>> from lib_log_terminal.domain.levels import LogLevel
        >>> LogEvent(LogLevel.INFO, "x", "id", progress=0.5).is_progress
        True
        >>> LogEvent(LogLevel.INFO, "x", "id").is_progress
        False
        """

        if self.progress == DONE:
            return True
        return isinstance(self.progress, numbers.Real) and not isinstance(self.progress, bool)

    @property
    def progress_finished(self) -> bool:
        """Return ``True`` for :data:`DONE` or a fraction of at least one."""

        if self.progress == DONE:
            return True
        if not self.is_progress:
            return False
        value = float(self.progress)  # type: ignore[arg-type]
        return not math.isnan(value) and value >= 1

    @property
    def is_sticky(self) -> bool:
        return self.sticky is not None and self.sticky is not False

    @property
    def sticky_done(self) -> bool:
        return self.sticky == DONE


__all__ = ["DONE", "LineInfo", "LogEvent", "RenderedLine"]
