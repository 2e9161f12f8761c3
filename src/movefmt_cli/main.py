from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from typer.main import get_command

from movefmt_cli.core.invoker import run_format
from movefmt_cli.errors import (
    ConfigurationError,
    FormatError,
    InvalidRequestError,
)
from movefmt_cli.models.config import Config, load_env
from movefmt_cli.models.request import EmitMode, FormatRequest
from movefmt_cli.models.result import CommandResponse
from movefmt_cli.utils.logging import configure_logging, get_logger
from movefmt_cli.utils.parsing import parse_config_overrides

cli = typer.Typer(add_completion=False)
logger = get_logger(__name__)


@cli.callback()
def root() -> None:
	"""
	Root callback for the movefmt-cli CLI.

	Keeps `fmt` as an explicit subcommand so the entrypoint can route to it.
	"""
	return None


def fmt_impl(
    emit_mode: EmitMode = EmitMode.OVERWRITE,
    file_path: Path | None = None,
    dir_path: Path | None = None,
    config_path: Path | None = None,
    config: List[str] | None = None,
    verbose: bool = False,
    quiet: bool = False,
) -> CommandResponse:
	"""
	Format Move sources with movefmt and print the JSON response.

	Parameters:
		emit_mode: How movefmt should emit its result.
		file_path: Single file to format.
		dir_path: Directory to format.
		config_path: movefmt.toml search root.
		config: Raw ``--config`` values (``key=value[,key=value]``).
		verbose: Print verbose output.
		quiet: Print less output.

	Returns:
		The response that was printed.
	"""
	load_env()
	try:
		try:
			settings = Config()
		except ValidationError as exc:
			raise ConfigurationError(f"invalid configuration: {exc}") from exc
		configure_logging(settings.log_level)
		try:
			overrides = parse_config_overrides(config)
		except ValueError as exc:
			raise InvalidRequestError(str(exc)) from exc
		request = FormatRequest.from_flags(
		    emit_mode=emit_mode,
		    file_path=file_path,
		    dir_path=dir_path,
		    config_path=config_path,
		    overrides=overrides,
		    verbose=verbose,
		    quiet=quiet,
		)
		response = CommandResponse.success(run_format(request, settings))
	except FormatError as exc:
		logger.debug("fmt failed: %s", exc)
		response = CommandResponse.failure(exc)
	Console().print_json(response.to_json())
	return response


@cli.command()
def fmt(
    emit_mode: EmitMode = typer.Option(
        EmitMode.OVERWRITE,
        "--emit-mode",
        help="How to generate and show the result after reformatting",
    ),
    file_path: Optional[Path] = typer.Option(
        None, "--file-path", help="Path to the file to be formatted"),
    dir_path: Optional[Path] = typer.Option(
        None,
        "--dir-path",
        help="Path to the directory to be formatted; defaults to the "
        "current directory when neither --file-path nor --dir-path is set",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config-path",
        help="Path searched recursively for the movefmt.toml config file",
    ),
    config: Optional[List[str]] = typer.Option(
        None,
        "--config",
        help="Config overrides as key=value[,key=value]; these take "
        "priority over movefmt.toml",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v",
                                 help="Print verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q",
                               help="Print less output"),
) -> None:
	"""
	Format the Move source code.

	Exits with status 1 when formatting fails.
	"""
	response = fmt_impl(emit_mode, file_path, dir_path, config_path, config,
	                    verbose, quiet)
	if response.exit_code:
		raise typer.Exit(response.exit_code)


def entrypoint(argv=None, *, standalone_mode: bool = True):
	"""
	Typer entrypoint that defaults to `fmt` when appropriate.

	Allows calling 'movefmt-cli --file-path a.move' without explicitly
	specifying the 'fmt' subcommand.

	Parameters:
		argv: Command-line arguments. Defaults to sys.argv[1:].
		standalone_mode: If True, Click handles exit codes.

	Returns:
		Result of the Click application main invocation.
	"""
	args = sys.argv[1:] if argv is None else list(argv)

	_click_app = get_command(cli)
	commands = getattr(_click_app, "commands", {}).keys()
	# every fmt argument is an option, so route anything that is not a
	# known command or the root --help to fmt
	if not args or (args[0] not in commands and args[0] != "--help"):
		args = ["fmt"] + args
	return _click_app.main(
	    args=args,
	    prog_name="movefmt-cli",
	    standalone_mode=standalone_mode,
	)


if __name__ == "__main__":
	entrypoint()
