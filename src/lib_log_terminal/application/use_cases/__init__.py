"""Use cases: layout, progress tracking and event orchestration."""

from __future__ import annotations

from .handle_event import HandleCallable, HandleResult, create_handle_log_event
from .layout import LineLayout
from .progress import ProgressTracker, progress_label

__all__ = [
    "HandleCallable",
    "HandleResult",
    "LineLayout",
    "ProgressTracker",
    "create_handle_log_event",
    "progress_label",
]
