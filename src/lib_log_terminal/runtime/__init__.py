"""Runtime façade: process-wide terminal logger.

Purpose
-------
Expose a stable entry point (``init``, ``get``, ``shutdown``) so host code can
configure one terminal logger per process and log from anywhere through
:class:`LoggerProxy` objects.

Contents
--------
* ``init`` - composition root applying environment overrides.
* ``get`` - scope-bound proxies with level helpers.
* ``shutdown`` - clears sticky lines, detaches the stdlib bridge and resets
  the singleton.
* ``is_initialised`` / ``current_logger`` / ``current_settings`` - state
  inspection.
* ``logdemo`` - guided tour used by the CLI.

System Role
-----------
Outer shell of the package. Inner layers never import from here.
"""

from __future__ import annotations

import logging
import time
from typing import IO, Any, Callable

from rich.console import Console

from lib_log_terminal.adapters.logging_handler import TerminalLogHandler
from lib_log_terminal.application.ports import MetadataFormatter
from lib_log_terminal.config import TerminalSettings, resolve_settings
from lib_log_terminal.domain import DONE, LogLevel
from lib_log_terminal.terminal_logger import TerminalLogger

from ._composition import LoggerProxy, build_terminal_logger
from ._state import TerminalRuntime, clear_runtime, current_runtime, is_initialised, set_runtime

logger = logging.getLogger(__name__)


def init(
    *,
    stream: Console | IO[str] | None = None,
    min_level: str | int | LogLevel = LogLevel.PROGRESS,
    right_justify: int = 0,
    show_limited: bool = True,
    force_color: bool = False,
    no_color: bool = False,
    meta_formatter: MetadataFormatter | None = None,
    capture_stdlib: bool = False,
) -> TerminalLogger:
    """Build and install the process-wide :class:`TerminalLogger`.

    Parameters
    ----------
    stream:
        Rich console or text stream to write to; ``sys.stderr`` when omitted.
    min_level, right_justify, show_limited:
        Logger options. ``LOG_TERMINAL_MIN_LEVEL``,
        ``LOG_TERMINAL_RIGHT_JUSTIFY`` and ``LOG_TERMINAL_SHOW_LIMITED`` take
        precedence when set.
    force_color, no_color:
        Console colour overrides; mirror ``LOG_TERMINAL_FORCE_COLOR`` and
        ``LOG_TERMINAL_NO_COLOR``.
    meta_formatter:
        Optional replacement for the default ``(color, prefix, suffix)``
        formatter.
    capture_stdlib:
        When ``True`` a :class:`TerminalLogHandler` is attached to the root
        :mod:`logging` logger until :func:`shutdown`.

    Raises
    ------
    RuntimeError
        When the runtime is already initialised.
    ValueError
        For unknown level names or malformed environment values.
    """

    if is_initialised():
        raise RuntimeError("lib_log_terminal.init() called twice; call shutdown() first")
    settings = resolve_settings(
        min_level=min_level,
        right_justify=right_justify,
        show_limited=show_limited,
        force_color=force_color,
        no_color=no_color,
    )
    terminal_logger = build_terminal_logger(settings, stream=stream, meta_formatter=meta_formatter)
    handler = None
    if capture_stdlib:
        handler = TerminalLogHandler(terminal_logger)
        logging.getLogger().addHandler(handler)
    set_runtime(TerminalRuntime(logger=terminal_logger, settings=settings, handler=handler))
    logger.debug("terminal logger initialised: %s", settings)
    return terminal_logger


def get(name: str) -> LoggerProxy:
    """Return a proxy logging under scope ``name``.

    Raises
    ------
    RuntimeError
        If :func:`init` has not been called yet.
    """

    return LoggerProxy(name, current_runtime().logger)


def current_logger() -> TerminalLogger:
    """Return the active :class:`TerminalLogger`."""

    return current_runtime().logger


def current_settings() -> TerminalSettings:
    """Return the resolved :class:`TerminalSettings` the active logger was built from.

    Environment overrides are already applied, so this reflects what is in
    effect rather than the arguments passed to :func:`init`.
    """

    return current_runtime().settings


def shutdown() -> None:
    """Clear the sticky block, detach the stdlib bridge and reset state.

    Raises
    ------
    RuntimeError
        If :func:`init` has not been called yet.
    """

    runtime = current_runtime()
    try:
        runtime.logger.sticky_messages.clear()
    finally:
        if runtime.handler is not None:
            logging.getLogger().removeHandler(runtime.handler)
        clear_runtime()


def logdemo(
    *,
    stream: Console | IO[str] | None = None,
    right_justify: int = 0,
    steps: int = 20,
    delay: float = 0.05,
    force_color: bool = False,
    sleep: Callable[[float], None] = time.sleep,
) -> dict[str, Any]:
    """Emit a tour of the renderer through a temporary runtime.

    Shows single and multi-line messages, key/value pairs (one of them elided),
    an exception, a sticky status line, a progress bar and a ``maxlog``
    limited warning, then shuts the runtime down again.

    Returns
    -------
    dict[str, Any]
        ``events`` holds the per-call result dictionaries, ``emitted`` and
        ``suppressed`` count them.

    Raises
    ------
    RuntimeError
        If the runtime is already initialised.
    ValueError
        When ``steps`` is smaller than one.
    """

    if is_initialised():
        raise RuntimeError("logdemo() requires lib_log_terminal to be uninitialised. Call shutdown() first.")
    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps}")

    init(stream=stream, right_justify=right_justify, force_color=force_color)
    events: list[dict[str, Any]] = []
    try:
        log = get("logdemo")
        events.append(log.info("Starting the demo", steps=steps, delay=delay))
        events.append(log.debug("A message\nspanning two lines", config={"alpha": 1, "beta": [1, 2, 3]}))
        events.append(log.warning("Large values are elided", data=list(range(1000))))
        try:
            raise ValueError("demo failure")
        except ValueError as exc:
            events.append(log.error("Caught an exception", exception=exc))
        for step in range(steps + 1):
            events.append(log.info(f"Status: step {step}/{steps}", _id="logdemo-status", sticky=True))
            events.append(log.progress("Crunching", step / steps, _id="logdemo-progress"))
            sleep(delay)
        events.append(log.info("Status: finished", _id="logdemo-status", sticky=DONE))
        for attempt in range(3):
            events.append(log.warning("Shown at most twice", attempt=attempt, maxlog=2))
        events.append(log.critical("Demo complete"))
    finally:
        shutdown()

    emitted = sum(1 for event in events if event["ok"])
    return {"events": events, "emitted": emitted, "suppressed": len(events) - emitted}


__all__ = [
    "LoggerProxy",
    "current_logger",
    "current_settings",
    "get",
    "init",
    "is_initialised",
    "logdemo",
    "shutdown",
]
