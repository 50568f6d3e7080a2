"""Port for turning arbitrary key/value payloads into display text."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ValueRendererPort(Protocol):
    """Render a value within a width and row budget."""

    def render(self, value: Any, *, width: int, rows: int, limited: bool) -> str:
        """Return the (possibly multi-line) text representation of ``value``."""


__all__ = ["ValueRendererPort"]
