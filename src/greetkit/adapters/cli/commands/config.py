"""``greetkit config``: print the merged configuration."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config

from greetkit.adapters.config.overrides import apply_overrides
from greetkit.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_FORMAT_CHOICES = click.Choice([member.value for member in OutputFormat], case_sensitive=False)


def _config_for_profile(cli_ctx: CLIContext, profile: str | None) -> tuple[Config, str | None]:
    """Pick the configuration to print.

    ``config --profile`` reloads for that profile and merges the root
    ``--set`` values again; otherwise the root command's configuration is used.
    """
    if not profile:
        return cli_ctx.config, cli_ctx.profile
    reloaded = cli_ctx.services.get_config(profile=profile)
    return apply_overrides(reloaded, cli_ctx.set_overrides), profile


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--format", "output_format", type=_FORMAT_CHOICES, default=OutputFormat.HUMAN.value, help="human or json")
@click.option("--section", default=None, help="Only print this top-level section, e.g. 'holidays'")
@click.option("--profile", default=None, help="Print the configuration of another profile")
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Print the configuration merged from defaults, files, .env and environment.

    An unknown ``--section`` exits with code 22.
    """
    cli_ctx = get_cli_context(ctx)
    config, shown_profile = _config_for_profile(cli_ctx, profile)
    fmt = OutputFormat(output_format.lower())

    with lib_log_rich.runtime.bind(
        job_id="cli-config",
        extra={"command": "config", "format": fmt.value, "profile": shown_profile},
    ):
        logger.info("Printing configuration", extra={"section": section})
        click.echo()
        try:
            cli_ctx.services.display_config(config, output_format=fmt, section=section, profile=shown_profile)
        except ValueError as exc:
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]
