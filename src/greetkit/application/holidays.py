"""Holiday lookup use case: fetch a year of holidays, keep the given day."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import TYPE_CHECKING

from ..domain.behaviors import select_holiday_names

if TYPE_CHECKING:
    import httpx

    from ..adapters.holidays.settings import HolidaySettings
    from .ports import FetchPublicHolidays

logger = logging.getLogger(__name__)


def _calendar_day(day: date | None) -> date:
    if day is None:
        return date.today()
    if isinstance(day, datetime):
        return day.date()
    return day


async def lookup_holiday_names(
    country_code: str,
    day: date | None = None,
    *,
    fetch_holidays: FetchPublicHolidays,
    settings: HolidaySettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> list[str]:
    """Return the local names of the holidays falling on ``day``.

    Issues exactly one fetch for the year of ``day``. Transport and parse
    failures from ``fetch_holidays`` propagate unchanged.

    Args:
        country_code: Two-letter country code, e.g. ``"US"``.
        day: Date to check. Defaults to today, evaluated at call time.
            ``datetime`` values are reduced to their calendar date.
        fetch_holidays: Port implementation returning the year's holidays.
        settings: Optional endpoint settings forwarded to the fetcher.
        client: Optional shared ``httpx.AsyncClient`` forwarded to the fetcher.

    Returns:
        Local holiday names in response order; empty when ``day`` is not a
        holiday.
    """
    target = _calendar_day(day)
    records = await fetch_holidays(target.year, country_code, settings=settings, client=client)
    names = select_holiday_names(records, target)
    logger.debug(
        "Selected holidays for date",
        extra={"country_code": country_code, "date": target.isoformat(), "matches": len(names)},
    )
    return names


__all__ = ["lookup_holiday_names"]
