"""Core logic for running movefmt.

Key modules:
    - invoker: Argument building and process execution
    - resolver: Locating the movefmt executable
"""

from movefmt_cli.core.invoker import FormatInvoker, build_arguments, run_format
from movefmt_cli.core.resolver import resolve_movefmt_path

__all__ = [
    # invoker
    "FormatInvoker",
    "build_arguments",
    "run_format",
    # resolver
    "resolve_movefmt_path",
]
