"""
movefmt invocation.

Translates a FormatRequest into the movefmt argument vector, runs the
formatter as a blocking child process and interprets its result.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Callable, List, TextIO

from movefmt_cli.core.resolver import resolve_movefmt_path
from movefmt_cli.errors import (
    OutputDecodeError,
    ProcessSpawnError,
    ToolExecutionError,
)
from movefmt_cli.models.config import Config
from movefmt_cli.models.request import (
    DirTarget,
    FileTarget,
    FormatRequest,
    Verbosity,
)
from movefmt_cli.models.result import FormatResult
from movefmt_cli.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_DIR_PATH = "./"

Resolver = Callable[[], Path]


def build_arguments(request: FormatRequest) -> List[str]:
	"""
	Build the movefmt argument vector for a request.

	The order is fixed: emit mode, config path, verbosity, overrides,
	then the target selector.

	Parameters:
		request: The validated format request.

	Returns:
		Arguments to pass after the executable path.
	"""
	args = [f"--emit={request.emit_mode.flag_value}"]
	if request.config_path is not None:
		args.append(f"--config-path={request.config_path}")
	if request.verbosity is Verbosity.VERBOSE:
		args.append("-v")
	elif request.verbosity is Verbosity.QUIET:
		args.append("-q")
	if request.overrides:
		pairs = ",".join(f"{k}={v}" for k, v in request.overrides.items())
		args.append(f"--config={pairs}")
	target = request.target
	if isinstance(target, FileTarget):
		args.append(f"--file-path={target.path}")
	elif isinstance(target, DirTarget):
		args.append(f"--dir-path={target.path}")
	else:
		args.append(f"--dir-path={DEFAULT_DIR_PATH}")
	return args


class FormatInvoker:
	"""Runs movefmt for one request at a time.

	Holds no per-call state; the executable is resolved on every call and
	each call owns its child process.
	"""

	def __init__(self, resolver: Resolver | None = None,
	             diagnostic_stream: TextIO | None = None):
		self._resolver = resolver or resolve_movefmt_path
		self._diagnostic_stream = diagnostic_stream

	@property
	def diagnostic_stream(self) -> TextIO:
		# looked up lazily so a swapped sys.stderr is honoured
		if self._diagnostic_stream is not None:
			return self._diagnostic_stream
		return sys.stderr

	def execute(self, request: FormatRequest) -> FormatResult:
		"""
		Run movefmt for the request and wait for it to finish.

		On success the formatter's stdout is written to the diagnostic
		stream and the returned result carries the ``"ok"`` sentinel.

		Parameters:
			request: The validated format request.

		Returns:
			FormatResult for a zero exit status.

		Raises:
			ToolNotFoundError: If the executable cannot be resolved.
			ProcessSpawnError: If the process cannot be started.
			ToolExecutionError: If movefmt exits with a non-zero status.
			OutputDecodeError: If movefmt's stdout is not valid UTF-8.
		"""
		exe = self._resolver()
		args = build_arguments(request)
		logger.debug("running %s %s", exe, " ".join(args))
		try:
			completed = subprocess.run(
			    [str(exe), *args],
			    stdin=subprocess.DEVNULL,
			    capture_output=True,
			    check=False,
			)
		except OSError as exc:
			logger.warning("failed to start %s: %s", exe, exc)
			raise ProcessSpawnError(exe, exc) from exc

		if completed.returncode != 0:
			stderr = _decode_best_effort(completed.stderr)
			logger.warning("movefmt exited with status %d",
			               completed.returncode)
			raise ToolExecutionError(completed.returncode, stderr)

		try:
			output = completed.stdout.decode("utf-8")
		except UnicodeDecodeError as exc:
			raise OutputDecodeError(exc) from exc
		self.diagnostic_stream.write(output)
		self.diagnostic_stream.flush()
		logger.debug("movefmt finished successfully")
		return FormatResult()


def _decode_best_effort(data: bytes | None) -> str:
	"""Decode captured stderr, falling back to an empty string."""
	try:
		return (data or b"").decode("utf-8")
	except UnicodeDecodeError:
		return ""


def run_format(request: FormatRequest,
               config: Config | None = None) -> FormatResult:
	"""
	Execute a request with the resolver bound to the given config.

	Parameters:
		request: The validated format request.
		config: Runtime configuration used to locate movefmt.

	Returns:
		FormatResult on success.
	"""
	invoker = FormatInvoker(resolver=lambda: resolve_movefmt_path(config))
	return invoker.execute(request)


__all__ = [
    "build_arguments",
    "FormatInvoker",
    "run_format",
    "DEFAULT_DIR_PATH",
]
