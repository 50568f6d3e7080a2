"""Rich console adapter."""

from __future__ import annotations

from .rich_console import RichTerminalAdapter, build_console

__all__ = ["RichTerminalAdapter", "build_console"]
