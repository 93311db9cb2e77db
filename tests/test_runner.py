"""Tests for the external command primitive."""

import subprocess
from pathlib import Path
from typing import Optional

import pytest

import vcs_stamp_core.vcs.runner as runner_module
from vcs_stamp_core.vcs.runner import run


class _Recorder:
    def __init__(self, stdout: str = "", returncode: int = 0, exc: Optional[Exception] = None) -> None:
        self.stdout = stdout
        self.returncode = returncode
        self.exc = exc
        self.args = None
        self.kwargs = None

    def __call__(self, args, **kwargs):
        self.args = args
        self.kwargs = kwargs
        if self.exc is not None:
            raise self.exc
        return subprocess.CompletedProcess(args, self.returncode, stdout=self.stdout)


@pytest.fixture
def recorder(monkeypatch):
    rec = _Recorder()
    monkeypatch.setattr(runner_module.subprocess, "run", rec)
    return rec


def test_splits_on_single_spaces(recorder) -> None:
    run("git describe --abbrev=0 --tags")
    assert recorder.args == ["git", "describe", "--abbrev=0", "--tags"]


def test_double_space_yields_empty_argument(recorder) -> None:
    run("hg heads  .")
    assert recorder.args == ["hg", "heads", "", "."]


def test_quotes_are_not_interpreted(recorder) -> None:
    run('git log "--format=%H %s"')
    assert recorder.args == ["git", "log", '"--format=%H', '%s"']


def test_output_is_trimmed(recorder) -> None:
    recorder.stdout = "\r\n  v1.0\t\n"
    assert run("git describe") == "v1.0"


def test_cwd_is_forwarded(recorder, tmp_path: Path) -> None:
    run("git rev-parse HEAD", tmp_path)
    assert recorder.kwargs["cwd"] == str(tmp_path)
    assert recorder.kwargs["stderr"] == subprocess.DEVNULL


def test_nonzero_exit_returns_empty(recorder) -> None:
    recorder.stdout = "fatal: partial output"
    recorder.returncode = 128
    assert run("git rev-parse HEAD") == ""


def test_os_error_returns_empty(recorder) -> None:
    recorder.exc = PermissionError("denied")
    assert run("bzr tags") == ""


def test_missing_binary_returns_empty() -> None:
    assert run("vcs-stamp-no-such-binary-0f3a --version") == ""
