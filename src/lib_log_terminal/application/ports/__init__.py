"""Protocols describing the collaborators of the terminal logger."""

from __future__ import annotations

from .console import Segment, TerminalPort
from .metadata import MetadataFormatter
from .progress import ProgressRendererPort
from .rate_limiter import RateLimiterPort
from .sticky import StickyMessagesPort
from .values import ValueRendererPort

__all__ = [
    "MetadataFormatter",
    "ProgressRendererPort",
    "RateLimiterPort",
    "Segment",
    "StickyMessagesPort",
    "TerminalPort",
    "ValueRendererPort",
]
