"""
movefmt-cli models.

Pydantic models for configuration, formatting requests and results.

Key models:
    - Config: Application configuration loaded from environment
    - FormatRequest: One validated formatter invocation
    - FormatResult: Outcome of a successful invocation
    - CommandResponse: JSON envelope printed by the CLI
"""

from .config import Config, load_env
from .request import (
    EmitMode,
    Verbosity,
    FileTarget,
    DirTarget,
    CurrentDirTarget,
    Target,
    FormatRequest,
)
from .result import FormatResult, CommandResponse, SUCCESS_REPORT

__all__ = [
    "Config",
    "load_env",
    "EmitMode",
    "Verbosity",
    "FileTarget",
    "DirTarget",
    "CurrentDirTarget",
    "Target",
    "FormatRequest",
    "FormatResult",
    "CommandResponse",
    "SUCCESS_REPORT",
]
