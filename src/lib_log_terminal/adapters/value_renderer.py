"""Text rendering of key/value payloads implementing :class:`ValueRendererPort`.

Purpose
-------
Turn arbitrary values into (possibly multi-line) text that fits the width and
row budget handed down by the layout engine. Plain values go through
:func:`rich.pretty.pretty_repr`; exceptions render their message and cause
chain, or a full traceback when logged as ``(exc, traceback)``.

Contents
--------
* :class:`PlainValue` / :class:`ErrorValue` - tagged variant of payloads.
* :func:`classify` - wrap a raw value in its variant.
* :class:`PrettyValueRenderer` - the renderer.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass
from types import TracebackType
from typing import Any, Union

from rich.pretty import pretty_repr

from lib_log_terminal.application.ports.values import ValueRendererPort

ELIDED_ROW = "⋮"
LIMIT_MIN_ITEMS = 3


@dataclass(frozen=True, slots=True)
class PlainValue:
    value: Any


@dataclass(frozen=True, slots=True)
class ErrorValue:
    error: BaseException
    traceback: TracebackType | None = None


ValueVariant = Union[PlainValue, ErrorValue]


def classify(value: Any) -> ValueVariant:
    """Return the variant describing ``value``.

    Exceptions and ``(exception, traceback)`` pairs (as produced by
    ``sys.exc_info()[1:]``) are errors; everything else is plain.

    >>> classify(ValueError("bad"))
    ErrorValue(error=ValueError('bad'), traceback=None)
    >>> classify([1, 2])
    PlainValue(value=[1, 2])
    """

    if isinstance(value, BaseException):
        return ErrorValue(value)
    if (
        isinstance(value, tuple)
        and len(value) == 2
        and isinstance(value[0], BaseException)
        and (value[1] is None or isinstance(value[1], TracebackType))
    ):
        return ErrorValue(value[0], value[1])
    return PlainValue(value)


def _describe(error: BaseException) -> str:
    message = str(error)
    name = type(error).__name__
    return f"{name}: {message}" if message else name


def render_error(variant: ErrorValue) -> str:
    """Return the message and cause chain of an error, or its traceback.

    >>> try:
    ...     try:
    ...         raise KeyError("k")
    ...     except KeyError as inner:
    ...         raise RuntimeError("outer") from inner
    ... except RuntimeError as exc:
    ...     print(render_error(ErrorValue(exc)))
    RuntimeError: outer
    caused by: KeyError: 'k'
    """

    error = variant.error
    if variant.traceback is not None:
        return "".join(traceback.format_exception(type(error), error, variant.traceback)).rstrip("\n")
    lines = [_describe(error)]
    seen = {id(error)}
    current = error
    while True:
        if current.__cause__ is not None:
            following, joiner = current.__cause__, "caused by: "
        elif current.__context__ is not None and not current.__suppress_context__:
            following, joiner = current.__context__, "during handling of: "
        else:
            break
        if id(following) in seen:
            break
        seen.add(id(following))
        lines.append(joiner + _describe(following))
        current = following
    return "\n".join(lines)


def elide_rows(text: str, rows: int) -> str:
    """Keep at most ``rows`` lines, replacing the overflow with ``⋮``.

    At least one line of content survives next to the marker.

    >>> elide_rows("a\\nb\\nc\\nd", 3)
    'a\\nb\\n⋮'
    >>> elide_rows("a\\nb", 3)
    'a\\nb'
    """

    lines = text.split("\n")
    rows = max(2, rows)
    if len(lines) <= rows:
        return text
    return "\n".join(lines[: rows - 1] + [ELIDED_ROW])


class PrettyValueRenderer(ValueRendererPort):
    """Render values with Rich's pretty printer inside a width/row budget.

    Examples
    --------
    >>> renderer = PrettyValueRenderer()
    >>> renderer.render(42, width=40, rows=5, limited=True)
    '42'
    >>> renderer.render(list(range(100)), width=80, rows=1, limited=True)
    '[0, 1, 2, ... +97]'
    """

    def render(self, value: Any, *, width: int, rows: int, limited: bool) -> str:
        variant = classify(value)
        if isinstance(variant, ErrorValue):
            return render_error(variant)
        max_width = max(1, width)
        if not limited:
            return pretty_repr(variant.value, max_width=max_width)
        text = pretty_repr(
            variant.value,
            max_width=max_width,
            max_length=max(LIMIT_MIN_ITEMS, rows),
            max_string=max_width * max(1, rows),
        )
        return elide_rows(text, rows)


__all__ = [
    "ELIDED_ROW",
    "ErrorValue",
    "PlainValue",
    "PrettyValueRenderer",
    "ValueVariant",
    "classify",
    "elide_rows",
    "render_error",
]
