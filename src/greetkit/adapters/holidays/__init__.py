"""Holiday adapter - Nager.Date public holiday API over httpx.

Contents:
    * :mod:`.settings` - HolidaySettings model and config loader
    * :mod:`.client` - Async fetch and response parsing
"""

from __future__ import annotations

from .client import HolidayPayload, fetch_public_holidays, parse_holidays
from .settings import DEFAULT_BASE_URL, HolidaySettings, load_holiday_settings_from_dict

__all__ = [
    "DEFAULT_BASE_URL",
    "HolidayPayload",
    "HolidaySettings",
    "fetch_public_holidays",
    "load_holiday_settings_from_dict",
    "parse_holidays",
]
