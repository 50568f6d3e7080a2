"""Line layout engine turning one log event into a boxed terminal unit.

Purpose
-------
Expand a message and its key/value pairs into indented lines, decorate them
with box-drawing tokens, prefix the level label and right-justify the location
suffix at the configured column.

Contents
--------
* Box tokens and :func:`box_token` selection by line position.
* :func:`message_lines` / :func:`pair_lines` building :class:`RenderedLine` lists.
* :func:`non_padded_width` - width of the last line before justification.
* :class:`LineLayout` - renders a complete unit through a :class:`TerminalPort`.

System Role
-----------
Core of the rendering pipeline; invoked by the event use case for every
non-progress event after rate limiting.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from lib_log_terminal.application.ports import (
    MetadataFormatter,
    Segment,
    TerminalPort,
    ValueRendererPort,
)
from lib_log_terminal.domain.events import LogEvent, RenderedLine
from lib_log_terminal.domain.metadata import MUTED_STYLE
from lib_log_terminal.domain.width import visible_width

logger = logging.getLogger(__name__)

BOX_SINGLE = "[ "
BOX_FIRST = "┌ "
BOX_MIDDLE = "│ "
BOX_LAST = "└ "
BOX_WIDTH = 2

VALUE_MARGIN = 5
"""Columns kept free to the right of rendered values."""

MIN_SUFFIX_PAD = 2


def box_token(index: int, count: int) -> str:
    """Return the left decoration for line ``index`` of ``count`` lines.

    >>> [box_token(i, 3) for i in range(3)]
    ['┌ ', '│ ', '└ ']
    >>> box_token(0, 1)
    '[ '
    """

    if count == 1:
        return BOX_SINGLE
    if index == 0:
        return BOX_FIRST
    if index < count - 1:
        return BOX_MIDDLE
    return BOX_LAST


def _chomp(text: str) -> str:
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


def message_lines(message: Any) -> list[RenderedLine]:
    """Split ``message`` into unindented lines, dropping one trailing newline.

    >>> message_lines("a\\nb\\n")
    [RenderedLine(indent=0, text='a'), RenderedLine(indent=0, text='b')]
    """

    return [RenderedLine(0, line) for line in _chomp(str(message)).split("\n")]


def pair_lines(
    pairs: Sequence[tuple[str, Any]],
    *,
    renderer: ValueRendererPort,
    rows: int,
    columns: int,
    limited: bool,
) -> list[RenderedLine]:
    """Render key/value pairs beneath a message.

    Each value gets an equal share of the terminal rows (at least one) and the
    terminal width minus :data:`VALUE_MARGIN`. Single-line values sit beside
    their key at indent 2; multi-line values follow a ``key =`` header at
    indent 3.
    """

    if not pairs:
        return []
    rows_per_value = max(1, rows // (len(pairs) + 1))
    width = columns - VALUE_MARGIN
    lines: list[RenderedLine] = []
    for key, value in pairs:
        value_lines = renderer.render(value, width=width, rows=rows_per_value, limited=limited).split("\n")
        if len(value_lines) == 1:
            lines.append(RenderedLine(2, f"{key} = {value_lines[0]}"))
        else:
            lines.append(RenderedLine(2, f"{key} ="))
            lines.extend(RenderedLine(3, line) for line in value_lines)
    return lines


def non_padded_width(lines: Sequence[RenderedLine], prefix: str, suffix: str) -> int:
    """Return the width of the last line including decoration but no padding.

    The prefix only counts when the unit is a single line; on multi-line units
    it sits on the first line while the suffix lands on the last one.

    >>> non_padded_width([RenderedLine(0, "hi")], "Info:", "@ x")
    15
    >>> non_padded_width([RenderedLine(0, "hi"), RenderedLine(2, "k = v")], "Info:", "")
    9
    """

    last = lines[-1]
    width = BOX_WIDTH
    if prefix and len(lines) == 1:
        width += len(prefix) + 1
    width += last.indent + visible_width(last.text)
    if suffix:
        width += len(suffix) + MIN_SUFFIX_PAD
    return width


def _bold(color: str) -> str:
    return f"bold {color}" if color else "bold"


class LineLayout:
    """Render events into styled, boxed and right-justified text units."""

    def __init__(
        self,
        *,
        terminal: TerminalPort,
        meta_formatter: MetadataFormatter,
        value_renderer: ValueRendererPort,
        show_limited: bool = True,
        right_justify: int = 0,
    ) -> None:
        self._terminal = terminal
        self._meta_formatter = meta_formatter
        self._value_renderer = value_renderer
        self._show_limited = show_limited
        self._right_justify = right_justify

    def lines(self, event: LogEvent) -> list[RenderedLine]:
        """Return the message and pair lines of ``event`` before decoration."""

        rows, columns = self._terminal.dimensions()
        lines = message_lines(event.message)
        lines.extend(
            pair_lines(
                event.pairs,
                renderer=self._value_renderer,
                rows=rows,
                columns=columns,
                limited=self._show_limited,
            )
        )
        return lines

    def render(self, event: LogEvent) -> str:
        """Return the complete unit for ``event`` as one string.

        When the last line plus suffix does not fit before the justify column
        the suffix moves to an extra trailing line. A justify column of ``0``
        therefore always gives metadata its own line.
        """

        _rows, columns = self._terminal.dimensions()
        lines = self.lines(event)
        color, prefix, suffix = self._meta_formatter(
            event.level, event.scope, event.group, event.event_id, event.file, event.line
        )
        suffix_pad = MIN_SUFFIX_PAD
        nonpad = non_padded_width(lines, prefix, suffix)
        justify = min(self._right_justify, columns)
        if nonpad > justify and suffix:
            lines.append(RenderedLine(0, ""))
            suffix_pad = 0
            nonpad = BOX_WIDTH + len(suffix)

        style = _bold(color)
        count = len(lines)
        segments: list[Segment] = []
        for index, (indent, text) in enumerate(lines):
            segments.append((box_token(index, count), style))
            if index == 0 and prefix:
                segments.append((prefix + " ", style))
            segments.append((" " * indent + text, None))
            if index == count - 1 and suffix:
                segments.append((" " * (max(0, justify - nonpad) + suffix_pad), None))
                segments.append((suffix, MUTED_STYLE))
            segments.append(("\n", None))
        logger.debug("laid out %d line(s) for %s", count, event.event_id)
        return self._terminal.render(segments)


__all__ = [
    "BOX_FIRST",
    "BOX_LAST",
    "BOX_MIDDLE",
    "BOX_SINGLE",
    "LineLayout",
    "box_token",
    "message_lines",
    "non_padded_width",
    "pair_lines",
]
