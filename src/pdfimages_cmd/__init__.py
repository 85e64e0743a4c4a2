"""Core package for pdfimages-cmd utilities."""

from .backend import Command, ExtractionResult, pdfimages, run_extraction
from .backend.builder import (
    with_custom_config,
    with_custom_path,
    with_owner_password,
    with_page_from,
    with_page_range,
    with_page_to,
    with_save_dct_as_jpeg,
    with_save_raw,
    with_user_password,
)
from .errors import (
    CommandCancelledError,
    CommandFailedError,
    CommandTimeoutError,
    ExecutableNotFoundError,
    PdfImagesError,
    SpawnError,
)
from .models import Options

__all__ = [
    "Command",
    "CommandCancelledError",
    "CommandFailedError",
    "CommandTimeoutError",
    "ExecutableNotFoundError",
    "ExtractionResult",
    "Options",
    "PdfImagesError",
    "SpawnError",
    "pdfimages",
    "run_extraction",
    "with_custom_config",
    "with_custom_path",
    "with_owner_password",
    "with_page_from",
    "with_page_range",
    "with_page_to",
    "with_save_dct_as_jpeg",
    "with_save_raw",
    "with_user_password",
]
