"""Default metadata policy: colour, prefix and location suffix per event.

Purpose
-------
Decide how an event is decorated before the layout engine draws it. The
formatter is a plain function so callers can swap in their own policy with the
same signature.

Contents
--------
* :func:`default_log_color` - four-way colour mapping keyed by level.
* :func:`default_metadata_formatter` - ``(color, prefix, suffix)`` builder.
* :func:`format_line` - ``"12"`` / ``"3-7"`` rendering of source lines.
"""

from __future__ import annotations

from typing import Any

from .events import LineInfo
from .levels import LogLevel

MUTED_STYLE = "bright_black"
"""Style applied to the location suffix."""


def default_log_color(level: LogLevel) -> str:
    """Return the rich colour name for ``level``.

    >>> default_log_color(LogLevel.DEBUG), default_log_color(LogLevel.ERROR)
    ('blue', 'bright_red')
    """

    if level < LogLevel.INFO:
        return "blue"
    if level < LogLevel.WARNING:
        return "cyan"
    if level < LogLevel.ERROR:
        return "yellow"
    return "bright_red"


def format_line(line: LineInfo) -> str:
    """Render a line number or an inclusive line range.

    >>> format_line(12)
    '12'
    >>> format_line(range(3, 8))
    '3-7'
    >>> format_line((3, 7))
    '3-7'
    """

    if isinstance(line, range):
        last = line[-1] if len(line) else line.start
        return f"{line.start}-{last}"
    if isinstance(line, tuple):
        first, last = line
        return f"{first}-{last}"
    return str(line)


def default_metadata_formatter(
    level: LogLevel,
    scope: Any,
    group: Any,
    event_id: Any,
    file: str | None,
    line: LineInfo,
) -> tuple[str, str, str]:
    """Return ``(color, prefix, suffix)`` for an event.

    Routine informational messages carry no location; everything else gets an
    ``"@ scope file:line"`` suffix built from whatever parts are known.

    >>> default_metadata_formatter(LogLevel.INFO, "app", None, "id", "a.py", 3)
    ('cyan', 'Info:', '')
    >>> default_metadata_formatter(LogLevel.WARNING, "app", None, "id", "a.py", 3)
    ('yellow', 'Warning:', '@ app a.py:3')
    >>> default_metadata_formatter(LogLevel.DEBUG, None, None, "id", None, None)
    ('blue', 'Debug:', '')
    """

    color = default_log_color(level)
    prefix = f"{level.label}:"
    if LogLevel.INFO <= level < LogLevel.WARNING:
        return color, prefix, ""
    suffix = ""
    if scope is not None:
        suffix += str(scope)
    if file is not None:
        if scope is not None:
            suffix += " "
        suffix += str(file)
        if line is not None:
            suffix += f":{format_line(line)}"
    if suffix:
        suffix = "@ " + suffix
    return color, prefix, suffix


__all__ = ["MUTED_STYLE", "default_log_color", "default_metadata_formatter", "format_line"]
