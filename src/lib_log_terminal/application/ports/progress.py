"""Port for drawing progress bars from an opaque per-id state."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ProgressRendererPort(Protocol):
    """Create bar states and render them at a given completion fraction."""

    def create(self) -> Any:
        """Return fresh state for a newly started bar."""

    def render(self, state: Any, label: str, fraction: float, *, width: int) -> str:
        """Return the bar text (no trailing newline) for ``fraction``."""


__all__ = ["ProgressRendererPort"]
