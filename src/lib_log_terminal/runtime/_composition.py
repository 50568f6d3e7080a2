"""Composition helpers: building the logger and call-site aware proxies."""

from __future__ import annotations

import inspect
from pathlib import Path
from typing import IO, Any

from rich.console import Console

from lib_log_terminal.application.ports import MetadataFormatter
from lib_log_terminal.application.use_cases import HandleResult
from lib_log_terminal.config import TerminalSettings
from lib_log_terminal.domain import LogEvent, LogLevel, default_metadata_formatter
from lib_log_terminal.terminal_logger import TerminalLogger

_RESERVED = ("_id", "_group", "maxlog", "sticky")


def build_terminal_logger(
    settings: TerminalSettings,
    *,
    stream: Console | IO[str] | None = None,
    meta_formatter: MetadataFormatter | None = None,
) -> TerminalLogger:
    """Create the :class:`TerminalLogger` described by ``settings``."""

    return TerminalLogger(
        stream,
        settings.min_level,
        meta_formatter=meta_formatter or default_metadata_formatter,
        show_limited=settings.show_limited,
        right_justify=settings.right_justify,
        force_color=settings.force_color,
        no_color=settings.no_color,
    )


def _call_site(depth: int) -> tuple[str, int]:
    frame = inspect.currentframe()
    try:
        for _ in range(depth):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return "<unknown>", 0
        return frame.f_code.co_filename, frame.f_lineno
    finally:
        del frame


class LoggerProxy:
    """Level helpers bound to a scope name and a :class:`TerminalLogger`.

    Keyword arguments become key/value pairs except for the reserved
    ``_id``, ``_group``, ``maxlog`` and ``sticky`` keywords. Without ``_id``
    the event id is ``"<name>:<file>:<line>"`` of the calling line, so a loop
    logging from one place shares a single id.
    """

    def __init__(self, name: str, logger: TerminalLogger) -> None:
        self._name = name
        self._logger = logger

    @property
    def name(self) -> str:
        return self._name

    def progress(self, message: Any = "", progress: float | str = 0.0, **pairs: Any) -> HandleResult:
        """Update (or finish, with ``progress=DONE`` or ``>= 1``) a progress bar."""
        return self._log(LogLevel.PROGRESS, message, pairs, progress=progress)

    def debug(self, message: Any, **pairs: Any) -> HandleResult:
        return self._log(LogLevel.DEBUG, message, pairs)

    def info(self, message: Any, **pairs: Any) -> HandleResult:
        return self._log(LogLevel.INFO, message, pairs)

    def warning(self, message: Any, **pairs: Any) -> HandleResult:
        return self._log(LogLevel.WARNING, message, pairs)

    def error(self, message: Any, **pairs: Any) -> HandleResult:
        return self._log(LogLevel.ERROR, message, pairs)

    def critical(self, message: Any, **pairs: Any) -> HandleResult:
        return self._log(LogLevel.CRITICAL, message, pairs)

    def _log(
        self,
        level: LogLevel,
        message: Any,
        pairs: dict[str, Any],
        *,
        progress: float | str | None = None,
    ) -> HandleResult:
        # Skip the frame walk for events the logger would drop anyway.
        if not self._logger.is_enabled(level):
            return {"ok": False, "reason": "below_level", "event_id": pairs.get("_id")}
        event_id, group, maxlog, sticky = (pairs.pop(key, None) for key in _RESERVED)
        file, line = _call_site(3)
        event = LogEvent(
            level=level,
            message=message,
            event_id=event_id or f"{self._name}:{file}:{line}",
            scope=self._name,
            group=group if group is not None else Path(file).stem,
            file=file,
            line=line,
            pairs=tuple(pairs.items()),
            maxlog=maxlog,
            progress=progress,
            sticky=sticky,
        )
        return self._logger.handle(event)


__all__ = ["LoggerProxy", "build_terminal_logger"]
