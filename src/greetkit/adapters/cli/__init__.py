"""Command-line adapter: the ``greetkit`` Click group, its commands and runner."""

from __future__ import annotations

from .commands import cli_config, cli_greet, cli_holiday, cli_info, cli_palindrome
from .context import (
    CLIContext,
    TracebackState,
    apply_traceback_preferences,
    get_cli_context,
    restore_traceback_state,
    snapshot_traceback_state,
)
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    "CLIContext",
    "ExitCode",
    "TracebackState",
    "apply_traceback_preferences",
    "cli",
    "cli_config",
    "cli_greet",
    "cli_holiday",
    "cli_info",
    "cli_palindrome",
    "get_cli_context",
    "main",
    "restore_traceback_state",
    "snapshot_traceback_state",
]
