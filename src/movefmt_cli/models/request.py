"""
Format request model.

Defines the immutable request value that describes one movefmt invocation:
emit mode, formatting target, config file, ad-hoc overrides and verbosity.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Annotated, Dict, Literal, Mapping, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
)

from movefmt_cli.errors import InvalidRequestError


class EmitMode(str, Enum):
	"""
	How movefmt reports or applies its result.

	OVERWRITE: Rewrite the source files in place.
	NEW_FILE: Write the formatted output next to the source.
	STD_OUT: Print formatted sources to standard output.
	DIFF: Print a diff against the original sources.
	"""

	OVERWRITE = "overwrite"
	NEW_FILE = "new-file"
	STD_OUT = "std-out"
	DIFF = "diff"

	@property
	def flag_value(self) -> str:
		"""Return the value movefmt expects after ``--emit=``."""
		return _EMIT_FLAG_VALUES[self]


_EMIT_FLAG_VALUES = {
    EmitMode.OVERWRITE: "overwrite",
    EmitMode.NEW_FILE: "new_file",
    EmitMode.STD_OUT: "stdout",
    EmitMode.DIFF: "diff",
}


class Verbosity(str, Enum):
	"""Output verbosity forwarded to movefmt."""

	NORMAL = "normal"
	VERBOSE = "verbose"
	QUIET = "quiet"

	@classmethod
	def from_flags(cls, verbose: bool = False, quiet: bool = False) -> "Verbosity":
		"""Collapse the verbose/quiet flag pair; verbose takes precedence."""
		if verbose:
			return cls.VERBOSE
		if quiet:
			return cls.QUIET
		return cls.NORMAL


class FileTarget(BaseModel):
	"""Format a single file."""

	model_config = ConfigDict(frozen=True)

	kind: Literal["file"] = "file"
	path: Path


class DirTarget(BaseModel):
	"""Format every Move file below a directory."""

	model_config = ConfigDict(frozen=True)

	kind: Literal["dir"] = "dir"
	path: Path


class CurrentDirTarget(BaseModel):
	"""No explicit target; movefmt works on the current directory."""

	model_config = ConfigDict(frozen=True)

	kind: Literal["current_dir"] = "current_dir"


Target = Annotated[Union[FileTarget, DirTarget, CurrentDirTarget],
                   Field(discriminator="kind")]


class FormatRequest(BaseModel):
	"""Validated, immutable description of one formatter invocation.

	Overrides are kept sorted by key so the ``--config`` argument is the
	same no matter in which order the pairs were supplied.
	"""

	model_config = ConfigDict(frozen=True)

	emit_mode: EmitMode = Field(default=EmitMode.OVERWRITE,
	                            description="How to emit the result")
	target: Target = Field(default_factory=CurrentDirTarget,
	                       description="File or directory to format")
	config_path: Optional[Path] = Field(
	    default=None, description="Path to a movefmt.toml search root")
	overrides: Mapping[str, str] = Field(
	    default_factory=lambda: MappingProxyType({}),
	    description="Config options that take priority over movefmt.toml",
	)
	verbosity: Verbosity = Field(default=Verbosity.NORMAL,
	                             description="Output verbosity")

	@field_validator("overrides", mode="before")
	@classmethod
	def normalize_overrides(cls, v: Optional[Mapping[str, str]]) -> Dict[str, str]:
		"""Trim, validate and key-sort the override pairs."""
		if v is None:
			return {}
		cleaned: Dict[str, str] = {}
		for raw_key, raw_value in dict(v).items():
			key = str(raw_key).strip()
			value = str(raw_value).strip()
			if not key or "=" in key or "," in key:
				raise ValueError(f"invalid override key {raw_key!r}")
			if not value or "," in value:
				raise ValueError(f"invalid value for override {key!r}")
			cleaned[key] = value
		return dict(sorted(cleaned.items()))

	@field_validator("overrides", mode="after")
	@classmethod
	def freeze_overrides(cls, v: Mapping[str, str]) -> Mapping[str, str]:
		# frozen=True only guards attribute assignment, not the mapping
		return MappingProxyType(dict(v))

	@field_serializer("overrides")
	def serialize_overrides(self, v: Mapping[str, str]) -> Dict[str, str]:
		return dict(v)

	@classmethod
	def from_flags(
	    cls,
	    emit_mode: EmitMode = EmitMode.OVERWRITE,
	    file_path: Optional[Path] = None,
	    dir_path: Optional[Path] = None,
	    config_path: Optional[Path] = None,
	    overrides: Optional[Mapping[str, str]] = None,
	    verbose: bool = False,
	    quiet: bool = False,
	) -> "FormatRequest":
		"""
		Build a request from raw command-line values.

		Parameters:
			emit_mode: How movefmt should emit its result.
			file_path: Single file to format.
			dir_path: Directory to format.
			config_path: Optional movefmt.toml search root.
			overrides: Ad-hoc config overrides.
			verbose: Request verbose output.
			quiet: Request quiet output (ignored when verbose is set).

		Returns:
			The validated FormatRequest.

		Raises:
			InvalidRequestError: If both file_path and dir_path are set or
				an override is malformed.
		"""
		if file_path is not None and dir_path is not None:
			raise InvalidRequestError(
			    "--file-path and --dir-path cannot be used together")
		if file_path is not None:
			target: Union[FileTarget, DirTarget,
			              CurrentDirTarget] = FileTarget(path=file_path)
		elif dir_path is not None:
			target = DirTarget(path=dir_path)
		else:
			target = CurrentDirTarget()
		try:
			return cls(
			    emit_mode=emit_mode,
			    target=target,
			    config_path=config_path,
			    overrides=overrides or {},
			    verbosity=Verbosity.from_flags(verbose, quiet),
			)
		except ValueError as exc:
			raise InvalidRequestError(str(exc)) from exc


__all__ = [
    "EmitMode",
    "Verbosity",
    "FileTarget",
    "DirTarget",
    "CurrentDirTarget",
    "Target",
    "FormatRequest",
]
