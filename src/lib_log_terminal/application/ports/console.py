"""Console port describing the terminal the logger writes to.

Purpose
-------
Define the abstraction for adapters that report terminal geometry, turn styled
segments into output text and write that text, letting the application layer
depend on a narrow protocol instead of on Rich.

Contents
--------
* :data:`Segment` - ``(text, style)`` pair accepted by :meth:`TerminalPort.render`.
* :class:`TerminalPort` - runtime-checkable protocol.

System Role
-----------
Clarifies the console-facing boundary so the layout engine, sticky manager and
progress renderer can share one output stream abstraction.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional, Protocol, Tuple, runtime_checkable

Segment = Tuple[str, Optional[str]]


@runtime_checkable
class TerminalPort(Protocol):
    """Styled, geometry-aware output stream."""

    @property
    def is_terminal(self) -> bool:
        """Return ``True`` when cursor control sequences are understood."""

    def dimensions(self) -> tuple[int, int]:
        """Return ``(rows, columns)`` of the terminal."""

    def render(self, segments: Iterable[Segment]) -> str:
        """Return ``segments`` as text with escape codes the stream supports."""

    def write(self, text: str) -> None:
        """Write already rendered ``text`` verbatim and flush."""


__all__ = ["Segment", "TerminalPort"]
