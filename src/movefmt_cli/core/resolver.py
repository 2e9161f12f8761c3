"""
Executable resolution for movefmt.

Locates the formatter binary from an explicit override, the default
install directory, or the PATH, in that order.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from movefmt_cli.errors import ToolNotFoundError
from movefmt_cli.models.config import Config
from movefmt_cli.utils.logging import get_logger

logger = get_logger(__name__)


def resolve_movefmt_path(config: Config | None = None) -> Path:
	"""
	Resolve the absolute path of the movefmt executable.

	Parameters:
		config: Runtime configuration. Defaults to a fresh Config().

	Returns:
		Absolute path to the executable.

	Raises:
		ToolNotFoundError: If no executable can be located.
	"""
	config = config or Config()
	if config.movefmt_exe:
		explicit = Path(config.movefmt_exe).expanduser()
		if explicit.is_file():
			logger.debug("using movefmt from MOVEFMT_EXE: %s", explicit)
			return explicit.resolve()
		raise ToolNotFoundError(
		    f"MOVEFMT_EXE points to {explicit}, which is not a file")

	installed = config.install_path / config.executable_name
	if installed.is_file():
		logger.debug("using installed movefmt: %s", installed)
		return installed.resolve()

	on_path = shutil.which(config.executable_name)
	if on_path:
		logger.debug("using movefmt from PATH: %s", on_path)
		return Path(on_path).resolve()

	raise ToolNotFoundError(
	    "Cannot locate the movefmt executable. Install movefmt into "
	    f"{config.install_path} or onto the PATH, or set MOVEFMT_EXE "
	    "to its location")


__all__ = ["resolve_movefmt_path"]
