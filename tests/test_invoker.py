"""Tests for FormatInvoker process execution and result interpretation."""

from __future__ import annotations

import io
import os
import stat
import subprocess
from pathlib import Path

import pytest

from movefmt_cli.core.invoker import FormatInvoker
from movefmt_cli.errors import (
    OutputDecodeError,
    ProcessSpawnError,
    ToolExecutionError,
    ToolNotFoundError,
)
from movefmt_cli.models.request import EmitMode, FileTarget, FormatRequest

FAKE_EXE = Path("/opt/movefmt/bin/movefmt")


def _fake_run(returncode: int, stdout: bytes = b"", stderr: bytes = b""):
	"""Return a (fake_run, calls) pair standing in for subprocess.run."""
	calls = []

	def fake_run(cmd, **kwargs):
		calls.append((cmd, kwargs))
		return subprocess.CompletedProcess(cmd, returncode, stdout, stderr)

	return fake_run, calls


class TestExecuteWithStubbedProcess:
	"""Tests for execute() with subprocess.run replaced."""

	def test_success_returns_ok_and_writes_report(self, monkeypatch):
		fake_run, calls = _fake_run(0, stdout=b"reformatted 2 files")
		monkeypatch.setattr("movefmt_cli.core.invoker.subprocess.run",
		                    fake_run)
		stream = io.StringIO()
		invoker = FormatInvoker(resolver=lambda: FAKE_EXE,
		                        diagnostic_stream=stream)

		result = invoker.execute(FormatRequest())

		assert result.report == "ok"
		assert stream.getvalue() == "reformatted 2 files"

	def test_invocation_shape(self, monkeypatch):
		fake_run, calls = _fake_run(0)
		monkeypatch.setattr("movefmt_cli.core.invoker.subprocess.run",
		                    fake_run)
		req = FormatRequest(
		    emit_mode=EmitMode.DIFF,
		    target=FileTarget(path=Path("a.move")),
		    overrides={"max_width": "100"},
		)
		FormatInvoker(resolver=lambda: FAKE_EXE,
		              diagnostic_stream=io.StringIO()).execute(req)

		assert len(calls) == 1
		cmd, kwargs = calls[0]
		assert cmd == [
		    str(FAKE_EXE), "--emit=diff", "--config=max_width=100",
		    "--file-path=a.move"
		]
		assert kwargs["stdin"] is subprocess.DEVNULL
		assert kwargs["capture_output"] is True
		assert kwargs["check"] is False

	def test_default_stream_is_stderr(self, monkeypatch, capsys):
		fake_run, _ = _fake_run(0, stdout=b"formatted a.move\n")
		monkeypatch.setattr("movefmt_cli.core.invoker.subprocess.run",
		                    fake_run)
		FormatInvoker(resolver=lambda: FAKE_EXE).execute(FormatRequest())
		captured = capsys.readouterr()
		assert captured.err == "formatted a.move\n"
		assert captured.out == ""

	def test_nonzero_exit_raises_execution_error(self, monkeypatch):
		fake_run, _ = _fake_run(1, stderr=b"parse error at line 4")
		monkeypatch.setattr("movefmt_cli.core.invoker.subprocess.run",
		                    fake_run)
		stream = io.StringIO()
		invoker = FormatInvoker(resolver=lambda: FAKE_EXE,
		                        diagnostic_stream=stream)

		with pytest.raises(ToolExecutionError) as exc_info:
			invoker.execute(FormatRequest())

		assert exc_info.value.exit_status == 1
		assert exc_info.value.stderr == "parse error at line 4"
		assert "status 1" in str(exc_info.value)
		assert stream.getvalue() == ""

	def test_undecodable_stderr_becomes_empty(self, monkeypatch):
		fake_run, _ = _fake_run(2, stderr=b"\xff\xfe bad")
		monkeypatch.setattr("movefmt_cli.core.invoker.subprocess.run",
		                    fake_run)
		with pytest.raises(ToolExecutionError) as exc_info:
			FormatInvoker(resolver=lambda: FAKE_EXE).execute(FormatRequest())
		assert exc_info.value.exit_status == 2
		assert exc_info.value.stderr == ""

	def test_undecodable_stdout_raises_decode_error(self, monkeypatch):
		fake_run, _ = _fake_run(0, stdout=b"\xc3\x28")
		monkeypatch.setattr("movefmt_cli.core.invoker.subprocess.run",
		                    fake_run)
		stream = io.StringIO()
		with pytest.raises(OutputDecodeError) as exc_info:
			FormatInvoker(resolver=lambda: FAKE_EXE,
			              diagnostic_stream=stream).execute(FormatRequest())
		assert "not valid utf8" in str(exc_info.value)
		assert isinstance(exc_info.value.cause, UnicodeDecodeError)
		assert stream.getvalue() == ""

	def test_spawn_failure_raises_spawn_error(self, monkeypatch):

		def failing_run(cmd, **kwargs):
			raise PermissionError(13, "Permission denied")

		monkeypatch.setattr("movefmt_cli.core.invoker.subprocess.run",
		                    failing_run)
		with pytest.raises(ProcessSpawnError) as exc_info:
			FormatInvoker(resolver=lambda: FAKE_EXE).execute(FormatRequest())
		assert exc_info.value.path == FAKE_EXE
		assert isinstance(exc_info.value.os_error, PermissionError)
		assert str(FAKE_EXE) in str(exc_info.value)

	def test_resolver_failure_spawns_nothing(self, monkeypatch):
		fake_run, calls = _fake_run(0)
		monkeypatch.setattr("movefmt_cli.core.invoker.subprocess.run",
		                    fake_run)

		def missing():
			raise ToolNotFoundError("Cannot locate the movefmt executable")

		with pytest.raises(ToolNotFoundError):
			FormatInvoker(resolver=missing).execute(FormatRequest())
		assert calls == []


def _write_script(path: Path, body: str) -> Path:
	path.write_text("#!/bin/sh\n" + body, encoding="utf-8")
	path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP
	           | stat.S_IXOTH)
	return path


@pytest.mark.skipif(os.name == "nt", reason="needs a POSIX shell")
class TestExecuteWithRealProcess:
	"""Tests that run a stub executable in place of movefmt."""

	def test_arguments_reach_the_child(self, tmp_path):
		exe = _write_script(tmp_path / "movefmt",
		                    'for a in "$@"; do echo "$a"; done\n')
		stream = io.StringIO()
		req = FormatRequest.from_flags(emit_mode=EmitMode.STD_OUT,
		                               config_path=Path("conf"),
		                               verbose=True)
		result = FormatInvoker(resolver=lambda: exe,
		                       diagnostic_stream=stream).execute(req)
		assert result.report == "ok"
		assert stream.getvalue().splitlines() == [
		    "--emit=stdout",
		    "--config-path=conf",
		    "-v",
		    "--dir-path=./",
		]

	def test_child_failure_is_classified(self, tmp_path):
		exe = _write_script(tmp_path / "movefmt",
		                    "printf 'parse error at line 4' >&2\nexit 1\n")
		with pytest.raises(ToolExecutionError) as exc_info:
			FormatInvoker(resolver=lambda: exe).execute(FormatRequest())
		assert exc_info.value.exit_status == 1
		assert exc_info.value.stderr == "parse error at line 4"

	def test_child_gets_no_stdin(self, tmp_path):
		exe = _write_script(tmp_path / "movefmt",
		                    'if read line; then echo got; else echo none; fi\n')
		stream = io.StringIO()
		FormatInvoker(resolver=lambda: exe,
		              diagnostic_stream=stream).execute(FormatRequest())
		assert stream.getvalue() == "none\n"

	def test_missing_executable_is_spawn_error(self, tmp_path):
		exe = tmp_path / "does-not-exist"
		with pytest.raises(ProcessSpawnError) as exc_info:
			FormatInvoker(resolver=lambda: exe).execute(FormatRequest())
		assert exc_info.value.path == exe
		assert isinstance(exc_info.value.os_error, FileNotFoundError)
