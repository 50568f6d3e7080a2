"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

from typing import Callable

name = "lib_log_terminal"
title = "Terminal log rendering with boxed messages, sticky lines and progress bars"
version = "0.1.0"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lib_log_terminal"


def _default_writer(text: str) -> None:
    print(text, end="")


def print_info(writer: Callable[[str], None] = _default_writer) -> None:
    """Emit the metadata banner through ``writer``, one newline-terminated line at a time.

    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for lib_log_terminal:\\n'
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    writer(f"Info for {name}:\n")
    writer("\n")
    for label, value in fields:
        writer(f"    {label:<{pad}} = {value}\n")
