"""Application layer - use cases and port definitions.

Contains use cases that orchestrate domain logic and port protocols that
define the interfaces for adapter implementations.

Contents:
    * :mod:`.greeting` - Callback and awaitable greeting entry points
    * :mod:`.holidays` - Holiday lookup use case
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .greeting import greet, greet_async
from .holidays import lookup_holiday_names
from .ports import (
    DisplayConfig,
    FetchPublicHolidays,
    GetConfig,
    InitLogging,
    LoadHolidaySettingsFromDict,
)

__all__ = [
    "DisplayConfig",
    "FetchPublicHolidays",
    "GetConfig",
    "InitLogging",
    "LoadHolidaySettingsFromDict",
    "greet",
    "greet_async",
    "lookup_holiday_names",
]
