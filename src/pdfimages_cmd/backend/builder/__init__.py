"""Build ``pdfimages`` command arguments from functional options."""

from .command_options import (
    DEFAULT_EXECUTABLE,
    CommandSpec,
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

__all__ = [
    "DEFAULT_EXECUTABLE",
    "CommandSpec",
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
