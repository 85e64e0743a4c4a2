"""Functional options accepted by :class:`~pdfimages_cmd.backend.command.Command`.

Each ``with_*`` function returns a callable that mutates a
:class:`CommandSpec` while a command is being constructed. Options are applied
in the order given; duplicates are not merged, so the tool's own argument
parser decides which value wins.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .command_args import (
    CONFIG_FLAG,
    DCT_AS_JPEG,
    FIRST_PAGE,
    LAST_PAGE,
    OWNER_PASSWORD,
    RAW,
    USER_PASSWORD,
)

if TYPE_CHECKING:
    from collections.abc import Callable

DEFAULT_EXECUTABLE = "pdfimages"


@dataclass(slots=True)
class CommandSpec:
    """Mutable state collected from options before the executable is resolved."""

    path: str = DEFAULT_EXECUTABLE
    args: list[str] = field(default_factory=list)


def _page_number(page: int) -> str:
    """Return ``page`` as a base-10 token, rejecting negatives and non-integers."""
    if isinstance(page, bool) or not isinstance(page, int):
        raise TypeError(f"Page number must be an integer, got {type(page).__name__}")
    if page < 0:
        raise ValueError(f"Page number must be non-negative: {page}")
    return str(page)


def with_custom_path(path: str | os.PathLike[str]) -> Callable[[CommandSpec], None]:
    """Use ``path`` instead of looking up ``pdfimages`` on ``PATH``."""
    exe = os.fspath(path)

    def apply(spec: CommandSpec) -> None:
        spec.path = exe

    return apply


def with_custom_config(path: str | os.PathLike[str]) -> Callable[[CommandSpec], None]:
    """Read ``path`` in place of ``~/.xpdfrc`` or the system-wide config file."""
    cfg = os.fspath(path)

    def apply(spec: CommandSpec) -> None:
        spec.args += [*CONFIG_FLAG, cfg]

    return apply


def with_page_from(first: int) -> Callable[[CommandSpec], None]:
    """Specify the first page to scan."""
    token = _page_number(first)

    def apply(spec: CommandSpec) -> None:
        spec.args += [*FIRST_PAGE, token]

    return apply


def with_page_to(last: int) -> Callable[[CommandSpec], None]:
    """Specify the last page to scan."""
    token = _page_number(last)

    def apply(spec: CommandSpec) -> None:
        spec.args += [*LAST_PAGE, token]

    return apply


def with_page_range(first: int, last: int) -> Callable[[CommandSpec], None]:
    """Specify the range of pages to scan.

    Both bounds are applied, ``-f`` before ``-l``.
    """
    apply_first = with_page_from(first)
    apply_last = with_page_to(last)

    def apply(spec: CommandSpec) -> None:
        apply_first(spec)
        apply_last(spec)

    return apply


def with_save_dct_as_jpeg() -> Callable[[CommandSpec], None]:
    """Save DCT-encoded images as JPEG files.

    All non-DCT images are still written as PBM (monochrome), PGM (grayscale)
    or PPM (color). Inline images are always saved in PBM/PGM/PPM format.
    """

    def apply(spec: CommandSpec) -> None:
        spec.args += DCT_AS_JPEG

    return apply


def with_save_raw() -> Callable[[CommandSpec], None]:
    """Write all images in their PDF-native formats.

    Most of these formats are not standard image formats, so this is mainly
    useful as input to a tool that generates PDF files.
    """

    def apply(spec: CommandSpec) -> None:
        spec.args += RAW

    return apply


def with_owner_password(password: str) -> Callable[[CommandSpec], None]:
    """Open the PDF with the owner password, bypassing all security restrictions."""

    def apply(spec: CommandSpec) -> None:
        spec.args += [*OWNER_PASSWORD, password]

    return apply


def with_user_password(password: str) -> Callable[[CommandSpec], None]:
    """Open the PDF with the user password."""

    def apply(spec: CommandSpec) -> None:
        spec.args += [*USER_PASSWORD, password]

    return apply


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
