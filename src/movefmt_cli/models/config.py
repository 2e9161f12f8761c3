from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv


def load_env(env_file: str | Path | None = None) -> None:
	"""Load environment variables from an `.env` file if present."""
	env_path = Path(env_file) if env_file else Path(".env")
	if env_path.exists():
		load_dotenv(env_path)


class Config(BaseSettings):
	"""Runtime configuration loaded from environment variables."""

	model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

	movefmt_exe: str | None = Field(
	    default=None,
	    alias="MOVEFMT_EXE",
	    description="Explicit path to the movefmt executable",
	)
	install_dir: str = Field(
	    "~/.local/bin",
	    alias="MOVEFMT_INSTALL_DIR",
	    description="Directory where movefmt is installed by default",
	)
	log_level: str = Field("warning", alias="LOG_LEVEL",
	                       description="Log level for the CLI")

	@field_validator("movefmt_exe", mode="before")
	@classmethod
	def blank_exe_is_unset(cls, v: Any) -> Any:
		if isinstance(v, str) and not v.strip():
			return None
		return v

	@field_validator("log_level")
	@classmethod
	def validate_log_level(cls, v: str) -> str:
		if v.upper() not in logging._nameToLevel:
			raise ValueError(f"unknown log level {v!r}")
		return v.lower()

	@property
	def install_path(self) -> Path:
		"""Return install_dir as an expanded Path."""
		return Path(os.path.expandvars(self.install_dir)).expanduser()

	@property
	def executable_name(self) -> str:
		return "movefmt.exe" if os.name == "nt" else "movefmt"


__all__ = ["Config", "load_env"]
