"""Greeting and palindrome CLI commands.

Contents:
    * :func:`cli_greet` - Print the greeting for a name.
    * :func:`cli_palindrome` - Report whether a text is a palindrome.
"""

from __future__ import annotations

import asyncio
import logging

import lib_log_rich.runtime
import rich_click as click

from greetkit.application.greeting import greet_async
from greetkit.domain.behaviors import is_palindrome
from greetkit.domain.errors import BlankNameError, NameTypeError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


async def _await_greeting(name: str, delay_ms: float) -> str:
    return await greet_async(name, delay_ms)


@click.command("greet", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name")
@click.option(
    "--delay-ms",
    type=click.FloatRange(min=0),
    default=0,
    show_default=True,
    help="Wait this many milliseconds before printing the greeting",
)
def cli_greet(name: str, delay_ms: float) -> None:
    """Print ``Hello, NAME!`` for a non-blank NAME.

    Surrounding whitespace is stripped. A blank NAME exits with code 22.
    """
    with lib_log_rich.runtime.bind(job_id="cli-greet", extra={"command": "greet", "delay_ms": delay_ms}):
        logger.info("Building greeting")
        try:
            greeting = asyncio.run(_await_greeting(name, delay_ms))
        except (NameTypeError, BlankNameError) as exc:
            logger.warning("Rejected name", extra={"error": str(exc)})
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
        click.echo(greeting)


@click.command("palindrome", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("text")
def cli_palindrome(text: str) -> None:
    """Print ``true`` when TEXT reads the same backwards, ``false`` otherwise.

    The comparison is exact: case and whitespace count.
    """
    with lib_log_rich.runtime.bind(job_id="cli-palindrome", extra={"command": "palindrome"}):
        click.echo("true" if is_palindrome(text) else "false")


__all__ = ["cli_greet", "cli_palindrome"]
