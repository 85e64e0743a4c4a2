"""Option model for a single extraction run."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

from cyclopts import Parameter
from pydantic import BaseModel, ConfigDict, Field, field_validator

from pdfimages_cmd.backend.builder import (
    DEFAULT_EXECUTABLE,
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

from .groups import IMAGES_GROUP, OUTPUT_GROUP, PAGES_GROUP, SECURITY_GROUP, SOURCE_GROUP, TOOL_GROUP
from .runtime import RuntimeOptions

if TYPE_CHECKING:
    from collections.abc import Callable

    from pdfimages_cmd.backend.builder import CommandSpec

#: Environment variable overriding the default ``pdfimages`` executable.
EXECUTABLE_ENV = "PDFIMAGES_PATH"


def _default_executable() -> str:
    return os.environ.get(EXECUTABLE_ENV) or DEFAULT_EXECUTABLE


@Parameter(name="*")
class Options(BaseModel):
    """Options for extracting images from a PDF with pdfimages."""

    source: Annotated[
        Path,
        Parameter(group=SOURCE_GROUP),
    ] = Field(description="Path to the PDF file.")
    output: Annotated[
        Path,
        Parameter(group=OUTPUT_GROUP),
    ] = Field(
        description=(
            "Image root for extracted files, e.g. 'images/page'. pdfimages writes '<root>-NNN.<ext>'; "
            "the directory must already exist."
        ),
    )
    first_page: Annotated[
        int | None,
        Parameter(group=PAGES_GROUP),
    ] = Field(None, ge=1, description="First page to scan.")
    last_page: Annotated[
        int | None,
        Parameter(group=PAGES_GROUP),
    ] = Field(None, ge=1, description="Last page to scan.")
    jpeg: Annotated[
        bool,
        Parameter(group=IMAGES_GROUP),
    ] = Field(False, description="Save DCT-encoded images as JPEG files.")
    raw: Annotated[
        bool,
        Parameter(group=IMAGES_GROUP),
    ] = Field(False, description="Write all images in their PDF-native formats.")
    owner_password: Annotated[
        str | None,
        Parameter(group=SECURITY_GROUP),
    ] = Field(None, description="Owner password for the PDF; bypasses all security restrictions.")
    user_password: Annotated[
        str | None,
        Parameter(group=SECURITY_GROUP),
    ] = Field(None, description="User password for the PDF.")
    executable: Annotated[
        str,
        Parameter(group=TOOL_GROUP),
    ] = Field(
        default_factory=_default_executable,
        description=f"Name or path of the pdfimages executable. [default: ${EXECUTABLE_ENV} or {DEFAULT_EXECUTABLE}]",
    )
    config: Annotated[
        Path | None,
        Parameter(group=TOOL_GROUP),
    ] = Field(None, description="Read this config file in place of ~/.xpdfrc.")
    runtime: RuntimeOptions = Field(default_factory=RuntimeOptions)

    model_config = ConfigDict(extra="forbid")

    @field_validator("source", "output")
    @classmethod
    def expand_user(cls, v: Path) -> Path:
        """Expand ``~``; existence is left to pdfimages."""
        return Path(v).expanduser()

    @field_validator("config")
    @classmethod
    def validate_config(cls, v: Path | None) -> Path | None:
        """Ensure an explicit config file exists."""
        if v is None:
            return None
        path = Path(v).expanduser().absolute()
        if not path.is_file():
            raise ValueError(f"Config path is not a file: {path}")
        return path

    def command_options(self) -> tuple[Callable[[CommandSpec], None], ...]:
        """Return the functional options describing this run, in flag order."""
        opts: list[Callable[[CommandSpec], None]] = [with_custom_path(self.executable)]
        if self.config is not None:
            opts.append(with_custom_config(self.config))
        if self.first_page is not None and self.last_page is not None:
            opts.append(with_page_range(self.first_page, self.last_page))
        elif self.first_page is not None:
            opts.append(with_page_from(self.first_page))
        elif self.last_page is not None:
            opts.append(with_page_to(self.last_page))
        if self.jpeg:
            opts.append(with_save_dct_as_jpeg())
        if self.raw:
            opts.append(with_save_raw())
        if self.owner_password is not None:
            opts.append(with_owner_password(self.owner_password))
        if self.user_password is not None:
            opts.append(with_user_password(self.user_password))
        return tuple(opts)


__all__ = ["EXECUTABLE_ENV", "Options"]
