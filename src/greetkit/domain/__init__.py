"""Domain layer - pure business logic with no I/O or framework dependencies.

Contains entities, value objects, and domain services that form the core
business logic of the application.

Contents:
    * :mod:`.behaviors` - Greeting validation, palindrome test, holiday selection
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
    * :mod:`.holidays` - Holiday value objects
"""

from __future__ import annotations

from .behaviors import (
    GREETING_TEMPLATE,
    GreetingResult,
    build_greeting,
    format_iso_date,
    is_palindrome,
    select_holiday_names,
)
from .enums import OutputFormat
from .errors import BlankNameError, CallbackNotCallableError, NameTypeError
from .holidays import HolidayRecord

__all__ = [
    # Behaviors
    "GREETING_TEMPLATE",
    "GreetingResult",
    "build_greeting",
    "format_iso_date",
    "is_palindrome",
    "select_holiday_names",
    # Enums
    "OutputFormat",
    # Errors
    "BlankNameError",
    "CallbackNotCallableError",
    "NameTypeError",
    # Values
    "HolidayRecord",
]
