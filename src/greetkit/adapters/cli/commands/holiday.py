"""Public holiday lookup CLI command.

Contents:
    * :func:`cli_holiday` - List the holidays of a country on a given date.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import date, datetime

import httpx
import lib_log_rich.runtime
import orjson
import rich_click as click
from pydantic import ValidationError

from greetkit.adapters.holidays.settings import HolidaySettings
from greetkit.application.holidays import lookup_holiday_names
from greetkit.domain.behaviors import format_iso_date

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _load_settings(cli_ctx: CLIContext) -> HolidaySettings:
    """Parse the ``[holidays]`` section, exiting with EX_CONFIG when invalid."""
    try:
        return cli_ctx.services.load_holiday_settings_from_dict(cli_ctx.config.as_dict())
    except ValidationError as exc:
        logger.error("Invalid holiday configuration", extra={"error": str(exc)})
        click.echo(f"\nError: Invalid [holidays] configuration: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def _report(names: list[str], country_code: str, day: date) -> None:
    if not names:
        click.echo(f"No public holiday in {country_code} on {format_iso_date(day)}.")
        return
    for name in names:
        click.echo(name)


@click.command("holiday", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("country_code")
@click.option(
    "--date",
    "on",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Date to check as YYYY-MM-DD (default: today)",
)
@click.pass_context
def cli_holiday(ctx: click.Context, country_code: str, on: datetime | None) -> None:
    """Print the local names of COUNTRY_CODE's public holidays on a date.

    One name per line; a note is printed when the date is no holiday.
    """
    cli_ctx = get_cli_context(ctx)
    day = on.date() if on is not None else date.today()

    extra = {"command": "holiday", "country_code": country_code, "date": format_iso_date(day)}
    with lib_log_rich.runtime.bind(job_id="cli-holiday", extra=extra):
        settings = _load_settings(cli_ctx)
        logger.info("Looking up public holidays", extra={"base_url": settings.base_url})
        try:
            names = asyncio.run(
                lookup_holiday_names(
                    country_code,
                    day,
                    fetch_holidays=cli_ctx.services.fetch_public_holidays,
                    settings=settings,
                )
            )
        except httpx.HTTPError as exc:
            logger.error("Holiday API request failed", extra={"error": str(exc), "error_type": type(exc).__name__})
            click.echo(f"\nError: Holiday API request failed: {exc}", err=True)
            raise SystemExit(ExitCode.SERVICE_UNAVAILABLE) from exc
        except (orjson.JSONDecodeError, ValidationError) as exc:
            logger.error("Unexpected holiday API response", extra={"error": str(exc)})
            click.echo(f"\nError: Unexpected holiday API response: {exc}", err=True)
            raise SystemExit(ExitCode.DATA_ERROR) from exc
        _report(names, country_code, day)


__all__ = ["cli_holiday"]
