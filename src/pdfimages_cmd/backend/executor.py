"""Build and execute pdfimages commands from an options model."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING, Annotated

from cyclopts import Parameter

from pdfimages_cmd.errors import PdfImagesError
from pdfimages_cmd.models import Options
from pdfimages_cmd.models.verbosity import Verbosity
from pdfimages_cmd.tools import join_command
from pdfimages_cmd.tools.helpers import emit_status, format_action_label, maybe_log_command

from .command import Command

if TYPE_CHECKING:
    import threading
    from collections.abc import Callable
else:
    from collections import abc

    Callable = abc.Callable

EXTRACTION_FAILED = "Extraction failed"

logger = logging.getLogger(__name__)


@dataclass
class ExtractionResult:
    """Result of a pdfimages execution."""

    success: bool
    error: str = ""
    command: str = ""
    output: str | None = None


def run_extraction(
    opts: Options,
    status_callback: Callable[[str], None] | None = None,
    cancel: threading.Event | None = None,
) -> ExtractionResult:
    """Build and optionally execute a pdfimages command from options."""
    try:
        cmd = Command(*opts.command_options())
    except PdfImagesError as e:
        return ExtractionResult(success=False, error=f"{EXTRACTION_FAILED}: {e}")
    argv = cmd.argv(opts.source, opts.output)
    display = join_command(argv[0], argv[1:])
    runtime = opts.runtime
    if runtime.dry_run:
        maybe_log_command(
            verbosity=runtime.verbosity,
            dry_run=True,
            status_callback=status_callback,
            banner=f"{format_action_label(dry_run=True)}: {display}",
        )
        return ExtractionResult(success=True, command=display)
    maybe_log_command(
        verbosity=runtime.verbosity,
        dry_run=False,
        status_callback=status_callback,
        banner=f"{format_action_label(dry_run=False)}: {display}",
    )
    try:
        output = cmd.run(
            opts.source,
            opts.output,
            cancel=cancel,
            timeout=runtime.timeout_seconds,
            verbose=runtime.verbosity >= Verbosity.OUTPUT,
            status_callback=status_callback,
        )
    except PdfImagesError as e:
        logger.debug("pdfimages run failed", exc_info=True)
        return ExtractionResult(success=False, error=f"{EXTRACTION_FAILED}: {e}", command=display)
    return ExtractionResult(success=True, command=display, output=output)


def pdfimages(
    opts: Options,
    status_callback: Annotated[Callable[[str], None] | None, Parameter(show=False)] = None,  # type: ignore[call-arg]
) -> int:
    """Extract images from a PDF file with pdfimages."""
    status_func = print if status_callback is None else status_callback
    result = run_extraction(opts, status_callback=status_func)
    if not result.success:
        err_func = partial(print, file=sys.stderr, flush=True) if status_callback is None else status_callback
        err_func(result.error)
        return 1
    return 0


__all__ = ["EXTRACTION_FAILED", "ExtractionResult", "pdfimages", "run_extraction"]
