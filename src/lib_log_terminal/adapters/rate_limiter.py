"""Per-id repeat limiter for log events.

Implements the ``maxlog`` policy: an event carrying a ceiling ``N`` is emitted
at most ``N`` times for its id over the lifetime of the logger.
"""

from __future__ import annotations

from typing import Dict

from lib_log_terminal.application.ports.rate_limiter import RateLimiterPort
from lib_log_terminal.domain.events import LogEvent


class MessageLimiter(RateLimiterPort):
    """Count remaining emissions per event id.

    Examples
    --------
    >>> from lib_log_terminal.domain import LogEvent, LogLevel
    >>> limiter = MessageLimiter()
    >>> event = LogEvent(LogLevel.INFO, "hi", "site-1", maxlog=1)
    >>> limiter.allow(event), limiter.allow(event)
    (True, False)
    >>> limiter.should_log("site-1"), limiter.should_log("other")
    (False, True)
    """

    def __init__(self) -> None:
        self._remaining: Dict[str, int] = {}

    def allow(self, event: LogEvent) -> bool:
        """Return ``True`` when ``event`` is within its ``maxlog`` ceiling."""
        ceiling = event.maxlog
        if ceiling is None or isinstance(ceiling, bool) or not isinstance(ceiling, int):
            return True
        remaining = self._remaining.setdefault(event.event_id, ceiling)
        self._remaining[event.event_id] = remaining - 1
        return remaining > 0

    def should_log(self, event_id: str) -> bool:
        return self._remaining.get(event_id, 1) > 0

    def remaining(self, event_id: str) -> int | None:
        """Return the emissions left for ``event_id`` or ``None`` if untracked."""
        return self._remaining.get(event_id)


__all__ = ["MessageLimiter"]
