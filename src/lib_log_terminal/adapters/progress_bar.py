"""Rich-based progress bar renderer implementing :class:`ProgressRendererPort`.

Purpose
-------
Draw ``label ━━━━━━╸      42%  ETA: 0:00:07`` style lines using
:class:`rich.progress_bar.ProgressBar`, sized to fill the terminal width.

Contents
--------
* :class:`ProgressBarState` - per-id state owned by the progress tracker.
* :func:`format_duration` - ``h:mm:ss`` rendering.
* :class:`RichProgressRenderer` - the renderer.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Callable

from rich.progress_bar import ProgressBar

from lib_log_terminal.application.ports.progress import ProgressRendererPort
from lib_log_terminal.domain.width import visible_width

from .console.rich_console import RichTerminalAdapter

MIN_BAR_WIDTH = 10


@dataclass(slots=True)
class ProgressBarState:
    """Timing and last fraction of one progress bar."""

    started_at: float
    updated_at: float
    fraction: float = 0.0


def format_duration(seconds: float) -> str:
    """Return ``seconds`` as ``h:mm:ss``.

    >>> format_duration(3725.4)
    '1:02:05'
    """

    total = int(round(seconds))
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours}:{minutes:02d}:{secs:02d}"


def _clamp(fraction: float) -> float:
    if math.isnan(fraction):
        return 0.0
    return min(1.0, max(0.0, fraction))


class RichProgressRenderer(ProgressRendererPort):
    """Render progress bars through the terminal adapter's Rich console."""

    def __init__(
        self,
        terminal: RichTerminalAdapter,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._terminal = terminal
        self._clock = clock

    def create(self) -> ProgressBarState:
        now = self._clock()
        return ProgressBarState(started_at=now, updated_at=now)

    def render(self, state: ProgressBarState, label: str, fraction: float, *, width: int) -> str:
        value = _clamp(float(fraction))
        now = self._clock()
        state.fraction = value
        state.updated_at = now
        tail = f" {value * 100:3.0f}%" + self._timing(value, max(0.0, now - state.started_at))
        bar_width = max(MIN_BAR_WIDTH, width - visible_width(label) - len(tail) - 1)
        bar = self._terminal.render_renderable(ProgressBar(total=1.0, completed=value, width=bar_width))
        # colourless consoles draw no empty track
        bar += " " * max(0, bar_width - visible_width(bar))
        return label + bar + tail

    @staticmethod
    def _timing(value: float, elapsed: float) -> str:
        if value >= 1.0:
            return f"  Time: {format_duration(elapsed)}"
        if value <= 0.0:
            return "  ETA: N/A"
        return f"  ETA: {format_duration(elapsed * (1.0 - value) / value)}"


__all__ = ["MIN_BAR_WIDTH", "ProgressBarState", "RichProgressRenderer", "format_duration"]
