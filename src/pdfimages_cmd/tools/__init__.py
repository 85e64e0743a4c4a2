"""pdfimages-related helper utilities."""

from .cli import join_command, quote_arg, resolve_executable, run
from .helpers import emit_status, format_action_label, maybe_log_command

__all__ = [
    "emit_status",
    "format_action_label",
    "join_command",
    "maybe_log_command",
    "quote_arg",
    "resolve_executable",
    "run",
]
