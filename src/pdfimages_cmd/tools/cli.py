"""Helpers for resolving and executing the ``pdfimages`` tool."""

from __future__ import annotations

import errno
import logging
import os
import shlex
import shutil
import subprocess
import time
from typing import TYPE_CHECKING

from pdfimages_cmd.errors import (
    CommandCancelledError,
    CommandFailedError,
    CommandTimeoutError,
    ExecutableNotFoundError,
    SpawnError,
)

from .helpers import emit_status

if TYPE_CHECKING:
    import threading
    from collections.abc import Callable, Sequence

# How often a running child is checked for cancellation, in seconds.
POLL_INTERVAL = 0.05

logger = logging.getLogger(__name__)


def resolve_executable(name: str | os.PathLike[str]) -> str:
    """Return the absolute path of ``name`` using a ``PATH`` lookup.

    Names containing a directory separator are checked directly.

    Raises:
        ExecutableNotFoundError: If ``name`` is missing or not executable.

    """
    exe = os.fspath(name)
    found = shutil.which(exe)
    if found is None:
        raise ExecutableNotFoundError(errno.ENOENT, "Executable not found or not executable", exe)
    return os.path.abspath(found)


def _kill(proc: subprocess.Popen[str]) -> None:
    """Kill ``proc`` and reap it so no child is left behind."""
    proc.kill()
    proc.wait()


def _wait(
    proc: subprocess.Popen[str],
    *,
    cancel: threading.Event | None,
    timeout: float | None,
) -> str:
    """Wait for ``proc`` to exit, honouring ``cancel`` and ``timeout``."""
    deadline = None if timeout is None else time.monotonic() + timeout
    while True:
        if cancel is not None and cancel.is_set():
            _kill(proc)
            raise CommandCancelledError("pdfimages run was cancelled")
        wait_for = POLL_INTERVAL if cancel is not None else None
        if deadline is not None:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                _kill(proc)
                raise CommandTimeoutError(timeout)  # type: ignore[arg-type]
            wait_for = remaining if wait_for is None else min(wait_for, remaining)
        try:
            output, _ = proc.communicate(timeout=wait_for)
        except subprocess.TimeoutExpired:
            continue
        return output or ""


def run(
    exe: str | os.PathLike[str],
    args: Sequence[str | os.PathLike[str]],
    *,
    cancel: threading.Event | None = None,
    timeout: float | None = None,
    verbose: bool = False,
    status_callback: Callable[[str], None] | None = None,
    list_cmd: bool = False,
) -> str:
    """Run an executable and return its combined stdout/stderr.

    The call blocks until the child exits. When ``cancel`` is set, or
    ``timeout`` seconds pass, the child is killed and reaped before the
    matching exception is raised. An event that is already set prevents the
    child from being started at all.

    When ``verbose`` is ``True``, the captured output is relayed line by line
    to ``status_callback`` (or the logger) once the process has finished.

    Raises:
        SpawnError: If the process could not be started.
        CommandFailedError: If the process exits with a non-zero status.
        CommandCancelledError: If ``cancel`` fired first.
        CommandTimeoutError: If ``timeout`` expired first.

    """
    cmd = [os.fspath(exe), *[os.fspath(a) for a in args]]

    if list_cmd:
        emit_status(f"Running: {join_command(exe, args)}", status_callback=status_callback)

    if cancel is not None and cancel.is_set():
        raise CommandCancelledError("pdfimages run was cancelled before it started")

    creationflags = getattr(subprocess, "CREATE_NO_WINDOW", 0)
    try:
        proc = subprocess.Popen(  # noqa: S603
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            creationflags=creationflags,
        )
    except OSError as e:
        raise SpawnError(e.errno, e.strerror or str(e), cmd[0]) from e

    logger.debug("Started %s (pid %d)", cmd[0], proc.pid)
    with proc:
        output = _wait(proc, cancel=cancel, timeout=timeout)

    if verbose:
        for line in output.splitlines():
            emit_status(line, status_callback=status_callback)
    if proc.returncode:
        raise CommandFailedError(proc.returncode, cmd, output)
    return output


def quote_arg(arg: str) -> str:
    """Quote ``arg`` for display if needed."""
    if os.name == "nt":
        return subprocess.list2cmdline([arg])
    return shlex.quote(arg)


def join_command(exe: str | os.PathLike[str], args: Sequence[str | os.PathLike[str]]) -> str:
    """Format a command for display."""
    parts = [os.fspath(exe), *[os.fspath(a) for a in args]]
    return " ".join(quote_arg(part) for part in parts)


__all__ = [
    "POLL_INTERVAL",
    "join_command",
    "quote_arg",
    "resolve_executable",
    "run",
]
