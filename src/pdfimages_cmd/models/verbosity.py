"""Verbosity levels for status output."""

from enum import IntEnum


class Verbosity(IntEnum):
    """How much of a run is reported to the user.

    ``COMMANDS`` shows the ``pdfimages`` command line before it runs;
    ``OUTPUT`` additionally relays whatever the tool printed.
    """

    QUIET = 0
    COMMANDS = 1
    OUTPUT = 2


__all__ = ["Verbosity"]
