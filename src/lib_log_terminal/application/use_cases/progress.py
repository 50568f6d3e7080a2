"""Progress-bar lifecycle tracking keyed by event id.

Purpose
-------
Own one bar state per active progress id and decide whether an update is drawn
as a sticky line (still running) or printed once as permanent output
(finished).

Contents
--------
* :func:`progress_label` - label normalisation applied before rendering.
* :class:`ProgressTracker` - absent -> active -> finished state machine.

System Role
-----------
Invoked by the event use case for every event carrying a progress value.
Cleanup on the finishing path is unconditional so an id never stays active
after its final update, even when rendering fails.
"""

from __future__ import annotations

import logging
import math
from typing import Any

from lib_log_terminal.application.ports import (
    ProgressRendererPort,
    StickyMessagesPort,
    TerminalPort,
)
from lib_log_terminal.domain.events import DONE

logger = logging.getLogger(__name__)

DEFAULT_LABEL = "Progress: "


def progress_label(message: Any) -> str:
    """Return the bar label for ``message``.

    >>> progress_label("")
    'Progress: '
    >>> progress_label("Copying")
    'Copying '
    >>> progress_label("Copying ")
    'Copying '
    """

    if message == "":
        return DEFAULT_LABEL
    label = str(message)
    if not label.endswith(" "):
        label += " "
    return label


def is_finished(progress: float | str) -> bool:
    if progress == DONE:
        return True
    value = float(progress)
    return not math.isnan(value) and value >= 1


class ProgressTracker:
    """Track progress bars per id and route their renderings."""

    def __init__(
        self,
        *,
        renderer: ProgressRendererPort,
        sticky: StickyMessagesPort,
        terminal: TerminalPort,
    ) -> None:
        self._renderer = renderer
        self._sticky = sticky
        self._terminal = terminal
        self._bars: dict[str, Any] = {}

    def __contains__(self, event_id: object) -> bool:
        return event_id in self._bars

    def __len__(self) -> int:
        return len(self._bars)

    def handle(self, event_id: str, message: Any, progress: float | str) -> bool:
        """Apply one progress update and return ``True`` when anything was drawn.

        A finishing update (``"done"`` or a fraction of at least one) for an id
        without an active bar is ignored.
        """

        finished = is_finished(progress)
        if finished and event_id not in self._bars:
            logger.debug("ignoring finish for unknown progress id %s", event_id)
            return False

        sticky_removed = False
        try:
            bar = self._bars.get(event_id)
            if bar is None:
                bar = self._renderer.create()
                self._bars[event_id] = bar
                logger.debug("started progress bar %s", event_id)
            fraction = 1.0 if progress == DONE else float(progress)
            _rows, columns = self._terminal.dimensions()
            text = self._renderer.render(bar, progress_label(message), fraction, width=columns)
            if finished:
                self._sticky.remove(event_id)
                sticky_removed = True
                self._sticky.write(text + "\n")
            else:
                self._sticky.upsert(event_id, text)
        finally:
            if finished:
                if not sticky_removed:
                    self._sticky.remove(event_id)
                self._bars.pop(event_id, None)
                logger.debug("finished progress bar %s", event_id)
        return True


__all__ = ["DEFAULT_LABEL", "ProgressTracker", "progress_label"]
