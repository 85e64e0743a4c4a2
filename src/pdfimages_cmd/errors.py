"""Exceptions raised while resolving and running ``pdfimages``."""

from __future__ import annotations

import subprocess


class PdfImagesError(Exception):
    """Base class for all pdfimages-cmd errors."""


class ExecutableNotFoundError(PdfImagesError, FileNotFoundError):
    """The ``pdfimages`` executable could not be located or is not executable."""


class SpawnError(PdfImagesError, OSError):
    """The operating system refused to start the child process."""


class CommandFailedError(PdfImagesError, subprocess.CalledProcessError):
    """``pdfimages`` ran but exited with a non-zero status."""


class CommandCancelledError(PdfImagesError):
    """The run was cancelled before ``pdfimages`` finished."""


class CommandTimeoutError(CommandCancelledError):
    """The run exceeded its timeout and ``pdfimages`` was killed."""

    def __init__(self, timeout: float) -> None:
        super().__init__(f"pdfimages timed out after {timeout:g} seconds")
        self.timeout = timeout


__all__ = [
    "CommandCancelledError",
    "CommandFailedError",
    "CommandTimeoutError",
    "ExecutableNotFoundError",
    "PdfImagesError",
    "SpawnError",
]
