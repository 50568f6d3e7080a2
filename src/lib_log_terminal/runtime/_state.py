"""Runtime state container and access helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import RLock

from lib_log_terminal.config import TerminalSettings
from lib_log_terminal.terminal_logger import TerminalLogger


@dataclass(slots=True)
class TerminalRuntime:
    """Live logger plus the settings it was built from."""

    logger: TerminalLogger
    settings: TerminalSettings
    handler: logging.Handler | None = None


_STATE: TerminalRuntime | None = None
_STATE_LOCK = RLock()


def set_runtime(runtime: TerminalRuntime) -> None:
    """Install ``runtime`` as the active singleton."""

    with _STATE_LOCK:
        global _STATE
        _STATE = runtime


def clear_runtime() -> TerminalRuntime | None:
    """Remove and return the active runtime if present."""

    with _STATE_LOCK:
        global _STATE
        previous, _STATE = _STATE, None
        return previous


def current_runtime() -> TerminalRuntime:
    """Return the active runtime or raise when uninitialised."""

    with _STATE_LOCK:
        if _STATE is None:
            raise RuntimeError("lib_log_terminal.init() must be called before using the logging API")
        return _STATE


def is_initialised() -> bool:
    """Return ``True`` when :func:`lib_log_terminal.init` has been called."""

    with _STATE_LOCK:
        return _STATE is not None


__all__ = [
    "TerminalRuntime",
    "clear_runtime",
    "current_runtime",
    "is_initialised",
    "set_runtime",
]
