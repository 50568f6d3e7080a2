"""Visible width of strings that may carry ANSI colour sequences."""

from __future__ import annotations

ESCAPE = "\x1b"


def visible_width(text: str) -> int:
    """Return how many terminal columns ``text`` occupies.

    Everything from an escape character up to and including the next ``m`` is
    skipped; an unterminated sequence swallows the rest of the string. Each
    remaining character counts as one column.

    >>> visible_width("plain")
    5
    >>> visible_width("\\x1b[31mred\\x1b[0m")
    3
    >>> visible_width("cut\\x1b[1;3")
    3
    """

    width = 0
    in_escape = False
    for char in text:
        if in_escape:
            if char == "m":
                in_escape = False
        elif char == ESCAPE:
            in_escape = True
        else:
            width += 1
    return width


__all__ = ["ESCAPE", "visible_width"]
