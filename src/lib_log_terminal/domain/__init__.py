"""Domain entities and pure policies used by the terminal logger."""

from __future__ import annotations

from .events import DONE, LogEvent, RenderedLine
from .levels import LogLevel
from .metadata import default_log_color, default_metadata_formatter
from .width import visible_width

__all__ = [
    "DONE",
    "LogEvent",
    "LogLevel",
    "RenderedLine",
    "default_log_color",
    "default_metadata_formatter",
    "visible_width",
]
