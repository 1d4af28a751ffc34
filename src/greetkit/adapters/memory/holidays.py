"""In-memory holiday source for testing.

Contents:
    * :class:`HolidayStub` - Serves canned records and records each request.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ...domain.holidays import HolidayRecord

if TYPE_CHECKING:
    import httpx

    from ..holidays.settings import HolidaySettings


def _empty_request_list() -> list[tuple[int, str]]:
    """Create an empty typed list for request records."""
    return []


@dataclass
class HolidayStub:
    """Canned holiday source matching the FetchPublicHolidays protocol.

    Each test should create its own HolidayStub instance to avoid cross-test pollution.

    Attributes:
        records: Records returned for every request, regardless of year or country.
        requests: ``(year, country_code)`` pairs in call order.
        raise_exception: When set, fetches raise this exception instead.

    Example:
        >>> import asyncio
        >>> stub = HolidayStub.with_records([HolidayRecord(date="2024-07-04", local_name="Independence Day")])
        >>> len(asyncio.run(stub.fetch_public_holidays(2024, "US")))
        1
        >>> stub.requests
        [(2024, 'US')]
    """

    records: list[HolidayRecord] = field(default_factory=list)
    requests: list[tuple[int, str]] = field(default_factory=_empty_request_list)
    raise_exception: Exception | None = None

    @classmethod
    def with_records(cls, records: Iterable[HolidayRecord]) -> HolidayStub:
        """Build a stub serving ``records``."""
        return cls(records=list(records))

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.requests.clear()
        self.raise_exception = None

    async def fetch_public_holidays(
        self,
        year: int,
        country_code: str,
        *,
        settings: HolidaySettings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> list[HolidayRecord]:
        """Record the request and return the canned records.

        Raises:
            Exception: If raise_exception is set, raises that exception.
        """
        self.requests.append((year, country_code))
        if self.raise_exception is not None:
            raise self.raise_exception
        return list(self.records)


__all__ = ["HolidayStub"]
