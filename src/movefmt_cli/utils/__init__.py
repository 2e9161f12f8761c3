"""Shared utility functions.

This subpackage provides common utility functions used across
the application with no dependencies on other subpackages.

Key modules:
    - parsing: ``--config`` override parsing
    - logging: Logging configuration
"""

from .parsing import parse_config_overrides
from .logging import configure_logging, get_logger

__all__ = [
    # parsing
    "parse_config_overrides",
    # logging
    "configure_logging",
    "get_logger",
]
