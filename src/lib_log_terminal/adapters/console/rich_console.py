"""Rich-powered terminal adapter implementing :class:`TerminalPort`.

Purpose
-------
Bridge the application layer with Rich: geometry comes from
:attr:`rich.console.Console.size`, styling from :class:`rich.text.Text` and
rendering from :meth:`rich.console.Console.capture`, so escape codes match the
colour capabilities Rich detected for the stream.

Contents
--------
* :func:`build_console` - console factory honouring colour overrides.
* :class:`RichTerminalAdapter` - adapter constructed by
  :class:`lib_log_terminal.TerminalLogger`.

System Role
-----------
Primary human-facing sink shared by the layout engine, the sticky manager and
the progress renderer.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import IO, Any

from rich.console import Console, RenderableType
from rich.text import Text

from lib_log_terminal.application.ports.console import Segment, TerminalPort


def build_console(
    stream: IO[str] | None = None,
    *,
    force_color: bool = False,
    no_color: bool = False,
) -> Console:
    """Return a Rich console writing to ``stream`` (standard error by default)."""

    force_terminal = True if force_color else None
    if stream is None:
        return Console(stderr=True, force_terminal=force_terminal, no_color=no_color)
    return Console(file=stream, force_terminal=force_terminal, no_color=no_color)


class RichTerminalAdapter(TerminalPort):
    """Render styled segments and write them through a Rich console.

    Examples
    --------
    >>> from io import StringIO
    >>> console = Console(file=StringIO(), width=40, height=10, color_system=None)
    >>> adapter = RichTerminalAdapter(console=console)
    >>> adapter.dimensions()
    (10, 40)
    >>> adapter.render([("[ ", "bold blue"), ("hello", None), ("\\n", None)])
    '[ hello\\n'
    """

    def __init__(
        self,
        *,
        console: Console | None = None,
        stream: IO[str] | None = None,
        force_color: bool = False,
        no_color: bool = False,
    ) -> None:
        """Wrap ``console`` or build one for ``stream`` with colour overrides."""
        if console is not None:
            self._console = console
        else:
            self._console = build_console(stream, force_color=force_color, no_color=no_color)

    @property
    def console(self) -> Console:
        return self._console

    @property
    def is_terminal(self) -> bool:
        return self._console.is_terminal

    def dimensions(self) -> tuple[int, int]:
        size = self._console.size
        return size.height, size.width

    def render(self, segments: Iterable[Segment]) -> str:
        text = Text(end="")
        for content, style in segments:
            text.append(content, style=style or None)
        return self.render_renderable(text)

    def render_renderable(self, renderable: RenderableType, **options: Any) -> str:
        """Return ``renderable`` captured as text without wrapping or cropping."""

        with self._console.capture() as capture:
            self._console.print(renderable, end="", soft_wrap=True, highlight=False, **options)
        return capture.get()

    def write(self, text: str) -> None:
        stream = self._console.file
        stream.write(text)
        stream.flush()


__all__ = ["RichTerminalAdapter", "build_console"]
