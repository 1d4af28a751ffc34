"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info command from :mod:`.info`
    * Greeting and palindrome commands from :mod:`.greeting`
    * Holiday command from :mod:`.holiday`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .greeting import cli_greet, cli_palindrome
from .holiday import cli_holiday
from .info import cli_info

__all__ = [
    "cli_config",
    "cli_greet",
    "cli_holiday",
    "cli_info",
    "cli_palindrome",
]
