"""HTTP client for the Nager.Date public holiday API.

Contents:
    * :class:`HolidayPayload` - Wire model for one JSON holiday object.
    * :func:`parse_holidays` - Decode a response body into domain records.
    * :func:`fetch_public_holidays` - One GET request per country and year.

System Role:
    Adapter behind the ``FetchPublicHolidays`` port. Failures are not caught:
    ``httpx.HTTPError`` for transport problems and non-2xx responses,
    ``orjson.JSONDecodeError`` or ``pydantic.ValidationError`` for bodies
    that do not have the expected shape.
"""

from __future__ import annotations

import logging

import httpx
import orjson
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from greetkit.domain.holidays import HolidayRecord

from .settings import HolidaySettings

logger = logging.getLogger(__name__)


class HolidayPayload(BaseModel):
    """One holiday object as returned by the API.

    Only ``date`` and ``localName`` are required; unknown fields are ignored.

    Example:
        >>> payload = HolidayPayload.model_validate({"date": "2024-07-04", "localName": "Independence Day"})
        >>> payload.to_record().local_name
        'Independence Day'
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    date: str
    local_name: str = Field(alias="localName")
    name: str | None = None
    country_code: str | None = Field(default=None, alias="countryCode")
    fixed: bool | None = None
    global_: bool | None = Field(default=None, alias="global")
    counties: list[str] | None = None
    launch_year: int | None = Field(default=None, alias="launchYear")
    types: list[str] | None = None

    def to_record(self) -> HolidayRecord:
        """Convert to the domain value object."""
        return HolidayRecord(
            date=self.date,
            local_name=self.local_name,
            name=self.name,
            country_code=self.country_code,
        )


_PAYLOAD_LIST = TypeAdapter(list[HolidayPayload])


def parse_holidays(body: bytes | str) -> list[HolidayRecord]:
    """Decode a JSON array of holiday objects into domain records.

    Args:
        body: Raw response body.

    Returns:
        Records in the order they appear in the body.

    Raises:
        orjson.JSONDecodeError: If the body is not valid JSON.
        pydantic.ValidationError: If the JSON is not a list of holiday objects.

    Example:
        >>> parse_holidays(b'[{"date": "2024-01-01", "localName": "Neujahr"}]')[0].date
        '2024-01-01'
    """
    payloads = _PAYLOAD_LIST.validate_python(orjson.loads(body))
    return [payload.to_record() for payload in payloads]


async def fetch_public_holidays(
    year: int,
    country_code: str,
    *,
    settings: HolidaySettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> list[HolidayRecord]:
    """Fetch all public holidays of ``country_code`` in ``year``.

    Args:
        year: Calendar year to query.
        country_code: Two-letter country code, inserted into the URL as given.
        settings: Endpoint settings. Defaults to the public Nager.Date API.
        client: Optional client to reuse. When None a client is opened for this
            single request and closed afterwards.

    Returns:
        Holiday records in response order.

    Raises:
        httpx.HTTPError: On connection failures, transport timeouts, or a
            non-success status code.
        orjson.JSONDecodeError: If the body is not valid JSON.
        pydantic.ValidationError: If the body is not a list of holiday objects.
    """
    effective = settings if settings is not None else HolidaySettings()
    url = effective.public_holidays_url(year, country_code)
    logger.debug("Fetching public holidays", extra={"url": url, "year": year, "country_code": country_code})

    if client is None:
        async with httpx.AsyncClient() as owned_client:
            response = await owned_client.get(url)
    else:
        response = await client.get(url)

    response.raise_for_status()
    records = parse_holidays(response.content)
    logger.debug("Fetched public holidays", extra={"url": url, "count": len(records)})
    return records


__all__ = [
    "HolidayPayload",
    "fetch_public_holidays",
    "parse_holidays",
]
