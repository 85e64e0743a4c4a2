"""Runtime option models."""

from __future__ import annotations

import math
from functools import cached_property

from cyclopts import Parameter
from pydantic import BaseModel, Field, field_validator
from pytimeparse2 import parse as parse_duration

from pdfimages_cmd.models.verbosity import Verbosity

from .groups import RUNTIME_GROUP


def parse_timespan_to_seconds(s: str | None) -> float | None:
    """Convert a time string to seconds.

    Args:
        s: Timespan such as ``"90s"``, ``"1m20s"`` or ``"00:01:30"``. A bare
            number is read as seconds. ``None`` or an empty string returns
            ``None``.

    Returns:
        The parsed duration in seconds.

    Raises:
        ValueError: If ``s`` cannot be parsed.

    """
    if not s:
        return None
    token = s.strip()
    try:
        return float(token)
    except ValueError:
        pass
    parsed = parse_duration(token)
    if parsed is None:
        raise ValueError(f"Unable to parse timespan: {s}")
    return float(parsed)


@Parameter(group=RUNTIME_GROUP)
class RuntimeOptions(BaseModel):
    """Runtime behavior options."""

    verbosity: Verbosity = Field(
        default=Verbosity.QUIET,
        description="Increase logging verbosity. Commands: show the pdfimages command; Output: also show its output.",
    )
    dry_run: bool = Field(default=False, description="Print the pdfimages command without executing it.")
    timeout: str | None = Field(
        default=None,
        description="Kill pdfimages if it runs longer than this. Examples: '30', '90s', '00:01:30'.",
    )

    @field_validator("verbosity", mode="before")
    @classmethod
    def _parse_verbosity(cls, v: object) -> Verbosity:
        """Accept numeric values or case-insensitive enum names.

        Allows CLI usage like ``--runtime.verbosity commands`` in addition to
        ``--runtime.verbosity 1``.
        """
        if isinstance(v, Verbosity):
            return v
        if isinstance(v, int):
            return Verbosity(v)
        if isinstance(v, str):
            token = v.strip()
            try:
                return Verbosity[token.upper()]
            except KeyError:
                try:
                    return Verbosity(int(token))
                except (ValueError, KeyError):
                    pass
        raise ValueError("verbosity must be one of quiet, commands, output, or 0/1/2")

    @field_validator("timeout", mode="before")
    @classmethod
    def _validate_timeout(cls, v: object) -> str | None:
        """Accept seconds as a number or a parseable, positive timespan."""
        if v is None:
            return None
        if isinstance(v, int | float) and not isinstance(v, bool):
            v = str(v)
        if not isinstance(v, str):
            raise ValueError("timeout must be a number of seconds or a timespan string")
        seconds = parse_timespan_to_seconds(v)
        if seconds is not None and not (math.isfinite(seconds) and seconds > 0):
            raise ValueError(f"timeout must be a positive, finite duration: {v}")
        return v

    @cached_property
    def timeout_seconds(self) -> float | None:
        """Timeout in seconds, or ``None`` to wait indefinitely."""
        return parse_timespan_to_seconds(self.timeout)


__all__ = ["RuntimeOptions", "parse_timespan_to_seconds"]
