"""
Error taxonomy for formatter invocations.

Every failure of a formatting run surfaces as one of these types. None of
them are retried; the CLI layer turns them into an error response.
"""

from __future__ import annotations

from pathlib import Path


class FormatError(RuntimeError):
	"""Base class for all formatter invocation failures."""


class InvalidRequestError(FormatError, ValueError):
	"""The request violates an input constraint (e.g. both targets set)."""


class ConfigurationError(FormatError):
	"""The runtime configuration (environment or .env) is invalid."""


class ToolNotFoundError(FormatError):
	"""The movefmt executable could not be located."""


class ProcessSpawnError(FormatError):
	"""The OS refused to start the formatter process."""

	def __init__(self, path: Path | str, os_error: OSError):
		self.path = Path(path)
		self.os_error = os_error
		super().__init__(f"IO error: {self.path}: {os_error}")


class ToolExecutionError(FormatError):
	"""The formatter ran but exited with a non-zero status."""

	def __init__(self, exit_status: int, stderr: str):
		self.exit_status = exit_status
		self.stderr = stderr
		super().__init__(
		    f"formatter exited with status {exit_status}: {stderr}")


class OutputDecodeError(FormatError):
	"""The formatter's stdout was not valid UTF-8."""

	def __init__(self, cause: UnicodeDecodeError):
		self.cause = cause
		super().__init__(
		    f"output generated by formatter is not valid utf8: {cause}")


__all__ = [
    "FormatError",
    "InvalidRequestError",
    "ConfigurationError",
    "ToolNotFoundError",
    "ProcessSpawnError",
    "ToolExecutionError",
    "OutputDecodeError",
]
