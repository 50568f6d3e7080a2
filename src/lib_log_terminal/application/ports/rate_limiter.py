"""Port for per-id repeat limits applied before any rendering."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_terminal.domain.events import LogEvent


@runtime_checkable
class RateLimiterPort(Protocol):
    """Decide whether a log event may be emitted."""

    def allow(self, event: LogEvent) -> bool:
        """Consume one emission for ``event`` and return ``True`` if permitted."""

    def should_log(self, event_id: str) -> bool:
        """Return ``True`` while ``event_id`` still has emissions left."""


__all__ = ["RateLimiterPort"]
