"""Tests for the prepared pdfimages command."""

from __future__ import annotations

import os
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from pdfimages_cmd import (
    Command,
    CommandCancelledError,
    CommandFailedError,
    CommandTimeoutError,
    ExecutableNotFoundError,
    PdfImagesError,
    SpawnError,
    with_custom_path,
    with_owner_password,
    with_page_range,
    with_save_dct_as_jpeg,
    with_save_raw,
)
from pdfimages_cmd.tools import cli


def _assert_gone(pid: int) -> None:
    with pytest.raises(ProcessLookupError):
        os.kill(pid, 0)


def _set_when_started(pid_file: Path, event: threading.Event) -> threading.Thread:
    """Set ``event`` once the stub has written its PID."""

    def wait_then_set() -> None:
        deadline = time.monotonic() + 10
        while not pid_file.exists() and time.monotonic() < deadline:
            time.sleep(0.01)
        event.set()

    thread = threading.Thread(target=wait_then_set, daemon=True)
    thread.start()
    return thread


def test_resolves_executable_on_path(echo_stub: Path) -> None:
    """The default name is looked up on PATH and made absolute."""
    cmd = Command()
    assert Path(cmd.path) == echo_stub
    assert os.path.isabs(cmd.path)
    assert cmd.args == ()


def test_missing_executable_fails_at_construction(stub_dir: Path) -> None:
    """Resolution errors surface from the constructor."""
    with pytest.raises(ExecutableNotFoundError) as excinfo:
        Command(with_custom_path("pdfimages-does-not-exist"))
    assert isinstance(excinfo.value, FileNotFoundError)
    assert isinstance(excinfo.value, PdfImagesError)
    assert excinfo.value.filename == "pdfimages-does-not-exist"


def test_non_executable_file_is_not_resolved(stub_dir: Path) -> None:
    """A file without execute permission is treated as missing."""
    plain = stub_dir / "pdfimages"
    plain.write_text("#!/bin/sh\nexit 0\n")
    plain.chmod(0o644)
    with pytest.raises(ExecutableNotFoundError):
        Command(with_custom_path(plain))


def test_custom_path_outside_search_path(stub_dir: Path, tmp_path: Path) -> None:
    """An explicit path is used even when it is not on PATH."""
    other = tmp_path / "elsewhere"
    other.mkdir()
    exe = other / "xpdf-pdfimages"
    exe.write_text("#!/bin/sh\nexit 0\n")
    exe.chmod(0o755)
    cmd = Command(with_custom_path(exe))
    assert cmd.path == str(exe)


def test_args_follow_option_order(echo_stub: Path) -> None:
    """Stored flags follow option order and are immutable."""
    cmd = Command(with_save_raw(), with_page_range(1, 3), with_owner_password("pw"))
    assert cmd.args == ("-raw", "-f", "1", "-l", "3", "-opw", "pw")
    assert isinstance(cmd.args, tuple)


def test_str_renders_placeholders(echo_stub: Path) -> None:
    """Display form lists the path, flags and positional placeholders."""
    cmd = Command(with_save_dct_as_jpeg(), with_page_range(2, 5))
    rendered = str(cmd)
    assert rendered.startswith(cmd.path)
    assert rendered.endswith("'<inpath>' '<outdir>'")
    assert " -j -f 2 -l 5 " in rendered


def test_repr_names_path_and_args(echo_stub: Path) -> None:
    cmd = Command(with_save_raw())
    assert repr(cmd) == f"Command(path={cmd.path!r}, args=('-raw',))"


def test_run_appends_positional_arguments(echo_stub: Path, pdf_file: Path, tmp_path: Path) -> None:
    """The tool receives flags, then input path, then output root."""
    cmd = Command(with_save_raw(), with_page_range(1, 2))
    out_root = tmp_path / "images" / "img"
    output = cmd.run(pdf_file, out_root)
    assert output.splitlines() == ["-raw", "-f", "1", "-l", "2", str(pdf_file), str(out_root)]
    assert cmd.args == ("-raw", "-f", "1", "-l", "2")


def test_run_does_not_check_paths(echo_stub: Path) -> None:
    """Invocation paths are handed to the tool without existence checks."""
    output = Command().run("missing.pdf", "no/such/dir")
    assert output.splitlines() == ["missing.pdf", "no/such/dir"]


def test_run_reuses_command(echo_stub: Path, tmp_path: Path) -> None:
    """One command can be run repeatedly with different paths."""
    cmd = Command(with_save_dct_as_jpeg())
    first = cmd.run("a.pdf", tmp_path / "a")
    second = cmd.run("b.pdf", tmp_path / "b")
    assert first.splitlines() == ["-j", "a.pdf", str(tmp_path / "a")]
    assert second.splitlines() == ["-j", "b.pdf", str(tmp_path / "b")]


def test_run_nonzero_exit(failing_stub: Path, pdf_file: Path, tmp_path: Path) -> None:
    """A failing tool raises a non-zero-exit error with its output."""
    cmd = Command()
    with pytest.raises(CommandFailedError) as excinfo:
        cmd.run(pdf_file, tmp_path)
    err = excinfo.value
    assert err.returncode == 1
    assert "Couldn't open file" in err.output
    assert err.cmd[-2:] == [str(pdf_file), str(tmp_path)]
    assert not isinstance(err, CommandCancelledError)
    assert not isinstance(err, ExecutableNotFoundError)


def test_run_exit_code_is_preserved(make_stub, tmp_path: Path) -> None:
    make_stub("exit 3")
    with pytest.raises(CommandFailedError) as excinfo:
        Command().run("doc.pdf", tmp_path)
    assert excinfo.value.returncode == 3


def test_spawn_error_keeps_os_error(echo_stub: Path, tmp_path: Path) -> None:
    """Spawn failures are raised as SpawnError chained to the OS error."""
    cmd = Command()
    echo_stub.unlink()
    with pytest.raises(SpawnError) as excinfo:
        cmd.run("doc.pdf", tmp_path)
    err = excinfo.value
    assert isinstance(err, OSError)
    assert isinstance(err.__cause__, OSError)
    assert err.errno == err.__cause__.errno
    assert err.filename == cmd.path


def test_precancelled_never_spawns(echo_stub: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """An already-set cancel event stops the run before any process starts."""
    spawned = False

    def fake_popen(*_args, **_kwargs):
        nonlocal spawned
        spawned = True
        raise AssertionError("process must not be started")

    monkeypatch.setattr(cli.subprocess, "Popen", fake_popen)
    cancel = threading.Event()
    cancel.set()
    with pytest.raises(CommandCancelledError):
        Command().run("doc.pdf", tmp_path, cancel=cancel)
    assert not spawned


def test_cancel_kills_running_process(sleeping_stub: tuple[Path, Path], tmp_path: Path) -> None:
    """Cancelling mid-run kills the child and returns promptly."""
    _, pid_file = sleeping_stub
    cmd = Command()
    cancel = threading.Event()
    watcher = _set_when_started(pid_file, cancel)
    start = time.monotonic()
    with pytest.raises(CommandCancelledError) as excinfo:
        cmd.run("doc.pdf", tmp_path, cancel=cancel)
    watcher.join()
    assert not isinstance(excinfo.value, CommandTimeoutError)
    assert time.monotonic() - start < 10
    _assert_gone(int(pid_file.read_text()))


def test_timeout_kills_running_process(sleeping_stub: tuple[Path, Path], tmp_path: Path) -> None:
    """Timeouts raise a cancellation error that records the limit."""
    _, pid_file = sleeping_stub
    start = time.monotonic()
    with pytest.raises(CommandTimeoutError) as excinfo:
        Command().run("doc.pdf", tmp_path, timeout=1.0)
    assert excinfo.value.timeout == 1.0
    assert isinstance(excinfo.value, CommandCancelledError)
    assert time.monotonic() - start < 10
    _assert_gone(int(pid_file.read_text()))


def test_fast_process_finishes_within_timeout(echo_stub: Path, tmp_path: Path) -> None:
    cancel = threading.Event()
    output = Command().run("doc.pdf", tmp_path, cancel=cancel, timeout=30)
    assert output.splitlines() == ["doc.pdf", str(tmp_path)]


def test_concurrent_runs_share_command(echo_stub: Path, tmp_path: Path) -> None:
    """Parallel runs each see only their own positional arguments."""
    cmd = Command(with_save_raw())
    inputs = [f"doc{i}.pdf" for i in range(8)]
    with ThreadPoolExecutor(max_workers=4) as pool:
        outputs = list(pool.map(lambda name: cmd.run(name, tmp_path / name), inputs))
    for name, output in zip(inputs, outputs, strict=True):
        assert output.splitlines() == ["-raw", name, str(tmp_path / name)]
    assert cmd.args == ("-raw",)
