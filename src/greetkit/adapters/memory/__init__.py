"""In-process port implementations for tests.

No file reads, no HTTP, no log runtime: ``build_testing`` wires these so a
test controls every input of the use cases.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import display_config_in_memory, get_config_in_memory
from .holidays import HolidayStub
from .logging import init_logging_in_memory

if TYPE_CHECKING:
    from greetkit.application.ports import DisplayConfig, FetchPublicHolidays, GetConfig, InitLogging

    _check_get_config: GetConfig = get_config_in_memory
    _check_display_config: DisplayConfig = display_config_in_memory
    _check_init_logging: InitLogging = init_logging_in_memory
    _check_fetch: FetchPublicHolidays = HolidayStub().fetch_public_holidays

__all__ = [
    "HolidayStub",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
