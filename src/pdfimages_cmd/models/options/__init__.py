"""Options package exports."""

from __future__ import annotations

from .options import EXECUTABLE_ENV, Options
from .runtime import RuntimeOptions, parse_timespan_to_seconds

__all__ = [
    "EXECUTABLE_ENV",
    "Options",
    "RuntimeOptions",
    "parse_timespan_to_seconds",
]
