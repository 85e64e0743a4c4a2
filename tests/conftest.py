"""Shared pytest fixtures.

Tests never call a real ``pdfimages``. Instead they write small shell stubs
into a private ``bin`` directory that is put first on ``PATH``.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:  # pragma: no cover - typing only
    from collections.abc import Callable
    from pathlib import Path

#: Stub body that prints each argument on its own line and succeeds.
ECHO_ARGS = 'printf "%s\\n" "$@"'
#: Stub body that reports an error the way pdfimages does and fails.
FAIL = "echo \"Syntax Error: Couldn't open file\" >&2\nexit 1"


@pytest.fixture(autouse=True)
def _no_env_executable(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ignore any ``PDFIMAGES_PATH`` set in the developer's environment."""
    monkeypatch.delenv("PDFIMAGES_PATH", raising=False)


@pytest.fixture
def stub_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Provide an empty directory searched before the rest of ``PATH``."""
    if sys.platform == "win32":
        pytest.skip("shell stubs require a POSIX shell")
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    return bin_dir


@pytest.fixture
def make_stub(stub_dir: Path) -> Callable[..., Path]:
    """Return a factory writing an executable ``/bin/sh`` stub."""

    def _make(body: str, name: str = "pdfimages") -> Path:
        path = stub_dir / name
        path.write_text(f"#!/bin/sh\n{body}\n")
        path.chmod(0o755)
        return path

    return _make


@pytest.fixture
def pdf_file(tmp_path: Path) -> Path:
    """Provide a placeholder input document; stubs never read it."""
    path = tmp_path / "doc.pdf"
    path.write_bytes(b"%PDF-1.4\n%%EOF\n")
    return path


@pytest.fixture
def echo_stub(make_stub: Callable[..., Path]) -> Path:
    """Provide a ``pdfimages`` stub that echoes its arguments and exits 0."""
    return make_stub(ECHO_ARGS)


@pytest.fixture
def failing_stub(make_stub: Callable[..., Path]) -> Path:
    """Provide a ``pdfimages`` stub that exits 1."""
    return make_stub(FAIL)


@pytest.fixture
def sleeping_stub(make_stub: Callable[..., Path], tmp_path: Path) -> tuple[Path, Path]:
    """Provide a long-running stub and the file it writes its PID to.

    ``exec`` keeps the PID stable so tests can check the process is gone.
    """
    pid_file = tmp_path / "stub.pid"
    stub = make_stub(f'echo $$ > "{pid_file}.tmp"\nmv "{pid_file}.tmp" "{pid_file}"\nexec sleep 30')
    return stub, pid_file
