"""Prepared ``pdfimages`` command.

``pdfimages`` saves images from a PDF file as PPM, PGM, PBM or JPEG files. It
reads the PDF, scans one or more pages, and writes one file per image. The
raw image data is extracted without any further transform: rotation,
clipping, color inversion and the like done by the content stream are
ignored.

Reference: https://www.xpdfreader.com/pdfimages-man.html
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from pdfimages_cmd.tools.cli import join_command, resolve_executable, run

from .builder.command_args import INPUT_PLACEHOLDER, OUTPUT_PLACEHOLDER
from .builder.command_options import CommandSpec

if TYPE_CHECKING:
    import threading
    from collections.abc import Callable


class Command:
    """A ``pdfimages`` invocation with its flags fixed at construction.

    Options are applied in order, then the executable is resolved once.
    The instance is read-only afterwards and may be run any number of times,
    including from several threads at once.

    Raises:
        ExecutableNotFoundError: If the executable cannot be resolved.

    """

    __slots__ = ("_args", "_path")

    def __init__(self, *opts: Callable[[CommandSpec], None]) -> None:
        spec = CommandSpec()
        for opt in opts:
            opt(spec)
        self._path = resolve_executable(spec.path)
        self._args = tuple(spec.args)

    @property
    def path(self) -> str:
        """Absolute path of the resolved executable."""
        return self._path

    @property
    def args(self) -> tuple[str, ...]:
        """Flags passed before the positional arguments."""
        return self._args

    def argv(self, inpath: str | os.PathLike[str], outdir: str | os.PathLike[str]) -> list[str]:
        """Return the full argument vector for one run."""
        return [self._path, *self._args, os.fspath(inpath), os.fspath(outdir)]

    def run(
        self,
        inpath: str | os.PathLike[str],
        outdir: str | os.PathLike[str],
        *,
        cancel: threading.Event | None = None,
        timeout: float | None = None,
        verbose: bool = False,
        status_callback: Callable[[str], None] | None = None,
    ) -> str:
        """Extract images from ``inpath`` into the ``outdir`` image root.

        Blocks until ``pdfimages`` exits and returns its combined output.
        See :func:`pdfimages_cmd.tools.cli.run` for the exceptions raised.
        """
        argv = self.argv(inpath, outdir)
        return run(
            argv[0],
            argv[1:],
            cancel=cancel,
            timeout=timeout,
            verbose=verbose,
            status_callback=status_callback,
        )

    def __str__(self) -> str:
        return join_command(self._path, (*self._args, INPUT_PLACEHOLDER, OUTPUT_PLACEHOLDER))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self._path!r}, args={self._args!r})"


__all__ = ["Command"]
