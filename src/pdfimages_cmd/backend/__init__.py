"""Backend utilities for building and executing pdfimages commands."""

from .command import Command
from .executor import ExtractionResult, pdfimages, run_extraction

__all__ = [
    "Command",
    "ExtractionResult",
    "pdfimages",
    "run_extraction",
]
