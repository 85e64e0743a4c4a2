"""Expose models and type definitions."""

from .options import Options, RuntimeOptions
from .verbosity import Verbosity

__all__ = [
    "Options",
    "RuntimeOptions",
    "Verbosity",
]
