"""Public-holiday value objects shared between the HTTP adapter and use cases."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class HolidayRecord:
    """A single public holiday as reported by the holiday API.

    Attributes:
        date: Calendar date of the holiday in ``yyyy-mm-dd`` form.
        local_name: Holiday name in the country's own language.
        name: English holiday name, when the API provides one.
        country_code: Two-letter country code the record belongs to.

    Example:
        >>> record = HolidayRecord(date="2024-12-25", local_name="Weihnachten", name="Christmas Day")
        >>> record.local_name
        'Weihnachten'
    """

    date: str
    local_name: str
    name: str | None = None
    country_code: str | None = None


__all__ = ["HolidayRecord"]
