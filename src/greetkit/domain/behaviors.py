"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from .errors import BlankNameError, NameTypeError
from .holidays import HolidayRecord

GREETING_TEMPLATE = "Hello, {name}!"

NAME_TYPE_MESSAGE = "the name argument must be a string"
BLANK_NAME_MESSAGE = "the name argument cannot be blank"


@dataclass(frozen=True, slots=True)
class GreetingResult:
    """Outcome of validating a name: either a greeting or an error.

    Exactly one of the two fields is populated.

    Example:
        >>> GreetingResult(greeting="Hello, Ann!").ok
        True
        >>> GreetingResult()
        Traceback (most recent call last):
        ...
        ValueError: GreetingResult needs exactly one of greeting or error
    """

    greeting: str | None = None
    error: Exception | None = None

    def __post_init__(self) -> None:
        if (self.greeting is None) == (self.error is None):
            raise ValueError("GreetingResult needs exactly one of greeting or error")

    @property
    def ok(self) -> bool:
        """Return True when validation produced a greeting."""
        return self.error is None


def build_greeting(name: object) -> GreetingResult:
    r"""Validate a name candidate and build the greeting for it.

    Shared by every greeting entry point so validation lives in one place.
    Never raises: failures come back as the ``error`` field so each adapter
    can report them through its own convention.

    Args:
        name: Value intended to be a person's name.

    Returns:
        GreetingResult with ``greeting`` set for a usable name, otherwise
        ``error`` set to :class:`NameTypeError` or :class:`BlankNameError`.

    Example:
        >>> build_greeting("  Ann ").greeting
        'Hello, Ann!'
        >>> type(build_greeting("   ").error).__name__
        'BlankNameError'
        >>> str(build_greeting(42).error)
        'the name argument must be a string'
    """
    if not isinstance(name, str):
        return GreetingResult(error=NameTypeError(NAME_TYPE_MESSAGE))

    trimmed = name.strip()
    if not trimmed:
        return GreetingResult(error=BlankNameError(BLANK_NAME_MESSAGE))
    return GreetingResult(greeting=GREETING_TEMPLATE.format(name=trimmed))


def is_palindrome(text: str) -> bool:
    """Return True when ``text`` reads the same reversed.

    Compares code points exactly: no case folding, no whitespace handling.

    Example:
        >>> is_palindrome("racecar")
        True
        >>> is_palindrome("Racecar")
        False
        >>> is_palindrome("")
        True
    """
    return text[::-1] == text


def format_iso_date(day: date) -> str:
    """Format a calendar date as ``yyyy-mm-dd`` with zero-padded fields.

    Example:
        >>> format_iso_date(date(2024, 7, 4))
        '2024-07-04'
    """
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def select_holiday_names(records: Iterable[HolidayRecord], day: date) -> list[str]:
    """Return local names of the records that fall on ``day``, in order.

    Example:
        >>> records = [
        ...     HolidayRecord(date="2024-01-01", local_name="New Year's Day"),
        ...     HolidayRecord(date="2024-07-04", local_name="Independence Day"),
        ... ]
        >>> select_holiday_names(records, date(2024, 7, 4))
        ['Independence Day']
        >>> select_holiday_names(records, date(2024, 7, 5))
        []
    """
    wanted = format_iso_date(day)
    return [record.local_name for record in records if record.date == wanted]


__all__ = [
    "BLANK_NAME_MESSAGE",
    "GREETING_TEMPLATE",
    "NAME_TYPE_MESSAGE",
    "GreetingResult",
    "build_greeting",
    "format_iso_date",
    "is_palindrome",
    "select_holiday_names",
]
