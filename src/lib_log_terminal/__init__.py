"""Public package surface for terminal log rendering.

``TerminalLogger`` renders structured events as boxed, coloured blocks with
aligned key/value pairs, progress bars and sticky status lines. The runtime
helpers (``init``, ``get``, ``shutdown``) manage one process-wide logger and
``TerminalLogHandler`` bridges the standard :mod:`logging` module.
"""

from __future__ import annotations

from .__init__conf__ import version as __version__
from .adapters.logging_handler import TerminalLogHandler
from .domain import DONE, LogEvent, LogLevel, default_log_color, default_metadata_formatter
from .runtime import (
    LoggerProxy,
    current_logger,
    current_settings,
    get,
    init,
    is_initialised,
    logdemo,
    shutdown,
)
from .terminal_logger import TerminalLogger

__all__ = [
    "DONE",
    "LogEvent",
    "LogLevel",
    "LoggerProxy",
    "TerminalLogHandler",
    "TerminalLogger",
    "__version__",
    "current_logger",
    "current_settings",
    "default_log_color",
    "default_metadata_formatter",
    "get",
    "init",
    "is_initialised",
    "logdemo",
    "shutdown",
]
