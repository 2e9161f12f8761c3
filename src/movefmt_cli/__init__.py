"""
movefmt-cli - command-line wrapper around the movefmt Move source formatter.

This package validates a formatting request, translates it into a movefmt
invocation, runs the formatter as a child process and reports the outcome.

Main entry points:
    - movefmt_cli.main: CLI entrypoint
    - movefmt_cli.core.invoker: FormatInvoker, build_arguments, run_format
    - movefmt_cli.models.request: FormatRequest and its building blocks
"""
