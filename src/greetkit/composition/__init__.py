"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config

# Configuration services
from ..adapters.config.loader import get_config

# Holiday services
from ..adapters.holidays import fetch_public_holidays, load_holiday_settings_from_dict

# Logging services
from ..adapters.logging.setup import init_logging
from ..application.holidays import lookup_holiday_names

# Static conformance assertions: pyright checks that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    import httpx

    from ..adapters.holidays.settings import HolidaySettings
    from ..adapters.memory.holidays import HolidayStub
    from ..application.ports import (
        DisplayConfig,
        FetchPublicHolidays,
        GetConfig,
        InitLogging,
        LoadHolidaySettingsFromDict,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_fetch_public_holidays: FetchPublicHolidays = fetch_public_holidays
    _assert_load_holiday_settings: LoadHolidaySettingsFromDict = load_holiday_settings_from_dict


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging
    fetch_public_holidays: FetchPublicHolidays
    load_holiday_settings_from_dict: LoadHolidaySettingsFromDict


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        init_logging=init_logging,
        fetch_public_holidays=fetch_public_holidays,
        load_holiday_settings_from_dict=load_holiday_settings_from_dict,
    )


def build_testing(*, holidays: HolidayStub | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        holidays: Optional HolidayStub serving canned records. When None, a
            fresh stub with no records is created. Pass your own stub to
            control the records and assert on requests.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        HolidayStub,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    holiday_stub = holidays if holidays is not None else HolidayStub()

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        fetch_public_holidays=holiday_stub.fetch_public_holidays,
        load_holiday_settings_from_dict=load_holiday_settings_from_dict,
    )


async def holiday(
    country_code: str,
    day: date | None = None,
    *,
    settings: HolidaySettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> list[str]:
    """Return the local names of ``country_code``'s public holidays on ``day``.

    Queries the Nager.Date API once for the year of ``day`` (today when
    omitted) and keeps the records dated exactly that day.

    Args:
        country_code: Two-letter country code, e.g. ``"US"``.
        day: Date to check; defaults to today at call time.
        settings: Endpoint settings; defaults to the public API.
        client: Optional ``httpx.AsyncClient`` to reuse.

    Returns:
        Holiday names in response order, empty when ``day`` is no holiday.

    Raises:
        httpx.HTTPError: On transport failure or a non-success status.
        orjson.JSONDecodeError: If the body is not JSON.
        pydantic.ValidationError: If the JSON is not a list of holidays.

    Example:
        >>> import asyncio
        >>> asyncio.run(holiday("US", date(2024, 7, 4)))  # doctest: +SKIP
        ['Independence Day']
    """
    return await lookup_holiday_names(
        country_code,
        day,
        fetch_holidays=fetch_public_holidays,
        settings=settings,
        client=client,
    )


__all__ = [
    # Configuration
    "get_config",
    "display_config",
    # Holidays
    "fetch_public_holidays",
    "holiday",
    "load_holiday_settings_from_dict",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
