"""Use case orchestrating the handling of a single log event.

Purpose
-------
Tie together rate limiting, progress routing, line layout and the final write
to either the sticky manager or the permanent output.

Contents
--------
* :data:`HandleResult` - diagnostic dictionary returned per event.
* :func:`create_handle_log_event` factory returning the runtime callable.

System Role
-----------
Application-layer orchestrator invoked by
:class:`lib_log_terminal.TerminalLogger`. One lock guards the whole event so
the per-id tables and the sticky block never see interleaved updates.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable

from lib_log_terminal.application.ports import RateLimiterPort, StickyMessagesPort
from lib_log_terminal.domain.events import LogEvent

from .layout import LineLayout
from .progress import ProgressTracker

logger = logging.getLogger(__name__)

HandleResult = dict[str, Any]
HandleCallable = Callable[[LogEvent], HandleResult]


def create_handle_log_event(
    *,
    layout: LineLayout,
    tracker: ProgressTracker,
    sticky: StickyMessagesPort,
    rate_limiter: RateLimiterPort,
    lock: threading.RLock | None = None,
) -> HandleCallable:
    """Build the event handler capturing the current collaborators.

    Parameters
    ----------
    layout:
        :class:`LineLayout` rendering non-progress events.
    tracker:
        :class:`ProgressTracker` owning per-id progress bars.
    sticky:
        Sticky-message manager; also the path for permanent writes so sticky
        lines stay below regular output.
    rate_limiter:
        Adapter enforcing ``maxlog`` ceilings.
    lock:
        Optional lock shared with the caller; a private ``RLock`` otherwise.

    Returns
    -------
    Callable[[LogEvent], dict[str, Any]]
        Function returning ``{"ok": True, "route": ...}`` for handled events and
        ``{"ok": False, "reason": "rate_limited"}`` for suppressed ones.
    """

    toolkit = _HandlerToolkit(
        layout=layout,
        tracker=tracker,
        sticky=sticky,
        rate_limiter=rate_limiter,
        lock=lock if lock is not None else threading.RLock(),
    )
    return _EventPipeline(toolkit)


@dataclass(frozen=True)
class _HandlerToolkit:
    layout: LineLayout
    tracker: ProgressTracker
    sticky: StickyMessagesPort
    rate_limiter: RateLimiterPort
    lock: Any


class _EventPipeline:
    def __init__(self, toolkit: _HandlerToolkit) -> None:
        self._toolkit = toolkit

    def __call__(self, event: LogEvent) -> HandleResult:
        with self._toolkit.lock:
            if not self._toolkit.rate_limiter.allow(event):
                return _reject_due_to_rate_limit(event)
            if event.is_progress:
                return _route_progress(self._toolkit, event)
            return _emit_unit(self._toolkit, event)


def _reject_due_to_rate_limit(event: LogEvent) -> HandleResult:
    logger.debug("maxlog exhausted for %s", event.event_id)
    return {"ok": False, "reason": "rate_limited", "event_id": event.event_id}


def _route_progress(toolkit: _HandlerToolkit, event: LogEvent) -> HandleResult:
    drawn = toolkit.tracker.handle(event.event_id, event.message, event.progress)  # type: ignore[arg-type]
    return {"ok": True, "route": "progress", "event_id": event.event_id, "drawn": drawn}


def _emit_unit(toolkit: _HandlerToolkit, event: LogEvent) -> HandleResult:
    text = toolkit.layout.render(event)
    if event.is_sticky:
        # Install first so the final frame is the last one shown.
        toolkit.sticky.upsert(event.event_id, text)
        if event.sticky_done:
            toolkit.sticky.remove(event.event_id)
        return {"ok": True, "route": "sticky", "event_id": event.event_id}
    toolkit.sticky.write(text)
    return {"ok": True, "route": "console", "event_id": event.event_id}


__all__ = ["HandleCallable", "HandleResult", "create_handle_log_event"]
