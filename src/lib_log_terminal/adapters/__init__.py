"""Adapters implementing the application ports with Rich and :mod:`logging`."""

from __future__ import annotations

from .console.rich_console import RichTerminalAdapter, build_console
from .logging_handler import TerminalLogHandler
from .progress_bar import RichProgressRenderer
from .rate_limiter import MessageLimiter
from .sticky import StickyMessages
from .value_renderer import PrettyValueRenderer

__all__ = [
    "MessageLimiter",
    "PrettyValueRenderer",
    "RichProgressRenderer",
    "RichTerminalAdapter",
    "StickyMessages",
    "TerminalLogHandler",
    "build_console",
]
