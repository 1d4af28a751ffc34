"""The ``greetkit`` command group.

Global flags are handled here: ``--traceback`` for error output, ``--profile``
and ``--set`` for configuration. Subcommands find the loaded configuration and
the wired services in the CLIContext stored on ``ctx.obj``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, cast

import rich_click as click
from lib_layered_config import Config

from greetkit import __init__conf__
from greetkit.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from greetkit.composition import AppServices


def _resolve_services(obj: object) -> AppServices:
    """Call the services factory handed in through ``ctx.obj``."""
    if not callable(obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    return cast("Callable[[], AppServices]", obj)()


def _load_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Read the layered configuration and merge the ``--set`` values on top.

    Raises:
        click.UsageError: If an override is malformed.
    """
    config = services.get_config(profile=profile)
    try:
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(help=__init__conf__.title, context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(
    __init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Print the full Python traceback when a command fails")
@click.option("--profile", default=None, help="Configuration profile to load, e.g. 'staging'")
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one configuration value; may be repeated, e.g. holidays.base_url=http://localhost:8080/api/v2",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Load configuration once, start logging, then hand over to the subcommand.

    Without a subcommand the help text is printed.
    """
    services = _resolve_services(ctx.obj)
    config = _load_config(services, profile, set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Command modules import this package, so they are attached after ``cli`` exists.
def _register_commands() -> None:
    from .commands import cli_config, cli_greet, cli_holiday, cli_info, cli_palindrome

    for command in (cli_greet, cli_palindrome, cli_holiday, cli_config, cli_info):
        cli.add_command(command)


_register_commands()


__all__ = ["cli"]
