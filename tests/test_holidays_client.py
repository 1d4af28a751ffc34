"""Nager.Date client: request shape, parsing and failure propagation."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import orjson
import pytest
from pydantic import ValidationError

from greetkit.adapters.holidays.client import HolidayPayload, fetch_public_holidays, parse_holidays
from greetkit.adapters.holidays.settings import HolidaySettings
from greetkit.domain.holidays import HolidayRecord

ClientFactory = Callable[..., httpx.AsyncClient]


# ======================== parse_holidays ========================


@pytest.mark.os_agnostic
def test_parse_holidays_keeps_response_order() -> None:
    """Records come back in body order, duplicates included."""
    body = orjson.dumps(
        [
            {"date": "2024-12-26", "localName": "Stefanitag"},
            {"date": "2024-12-25", "localName": "Christtag"},
            {"date": "2024-12-25", "localName": "Weihnachten"},
        ]
    )

    records = parse_holidays(body)

    assert [record.local_name for record in records] == ["Stefanitag", "Christtag", "Weihnachten"]


@pytest.mark.os_agnostic
def test_parse_holidays_maps_wire_fields_to_records() -> None:
    """camelCase wire names land on the snake_case record fields."""
    body = b'[{"date": "2024-07-04", "localName": "Independence Day", "name": "Independence Day", "countryCode": "US"}]'

    assert parse_holidays(body) == [
        HolidayRecord(date="2024-07-04", local_name="Independence Day", name="Independence Day", country_code="US")
    ]


@pytest.mark.os_agnostic
def test_parse_holidays_ignores_unknown_fields() -> None:
    """Fields the model does not know about are dropped."""
    body = b'[{"date": "2024-01-01", "localName": "Neujahr", "brandNew": 1, "global": true, "launchYear": null}]'

    [record] = parse_holidays(body)

    assert record.local_name == "Neujahr"


@pytest.mark.os_agnostic
def test_parse_holidays_accepts_an_empty_list() -> None:
    """A country without holidays yields no records."""
    assert parse_holidays(b"[]") == []


@pytest.mark.os_agnostic
def test_parse_holidays_rejects_invalid_json() -> None:
    """A non-JSON body raises orjson.JSONDecodeError."""
    with pytest.raises(orjson.JSONDecodeError):
        parse_holidays(b"<html>maintenance</html>")


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    "document",
    [
        {"date": "2024-01-01", "localName": "Neujahr"},
        [{"localName": "Neujahr"}],
        [{"date": "2024-01-01"}],
        ["2024-01-01"],
        None,
    ],
)
def test_parse_holidays_rejects_unexpected_shapes(document: Any) -> None:
    """JSON that is not a list of holiday objects raises ValidationError."""
    with pytest.raises(ValidationError):
        parse_holidays(orjson.dumps(document))


@pytest.mark.os_agnostic
def test_holiday_payload_accepts_field_names_too() -> None:
    """populate_by_name allows building payloads from Python names."""
    payload = HolidayPayload(date="2024-01-01", local_name="Neujahr", country_code="AT")

    assert payload.to_record().country_code == "AT"


# ======================== fetch_public_holidays ========================


@pytest.mark.os_agnostic
@pytest.mark.asyncio
async def test_fetch_public_holidays_requests_year_and_country(holiday_api: ClientFactory) -> None:
    """One GET to {base_url}/PublicHolidays/{year}/{country}."""
    seen: list[httpx.Request] = []

    async with holiday_api(seen=seen) as client:
        records = await fetch_public_holidays(2024, "US", client=client)

    assert len(records) == 4
    assert [str(request.url) for request in seen] == ["https://date.nager.at/api/v2/PublicHolidays/2024/US"]
    assert seen[0].method == "GET"


@pytest.mark.os_agnostic
@pytest.mark.asyncio
async def test_fetch_public_holidays_honours_configured_base_url(holiday_api: ClientFactory) -> None:
    """The configured base URL replaces the public endpoint."""
    seen: list[httpx.Request] = []
    settings = HolidaySettings(base_url="http://localhost:8080/api/v2/")

    async with holiday_api(seen=seen) as client:
        await fetch_public_holidays(2025, "de", settings=settings, client=client)

    assert str(seen[0].url) == "http://localhost:8080/api/v2/PublicHolidays/2025/de"


@pytest.mark.os_agnostic
@pytest.mark.asyncio
async def test_fetch_public_holidays_raises_on_error_status(holiday_api: ClientFactory) -> None:
    """A non-success status is a transport failure."""
    async with holiday_api({"title": "Not Found"}, status_code=404) as client:
        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            await fetch_public_holidays(2024, "XX", client=client)

    assert exc_info.value.response.status_code == 404


@pytest.mark.os_agnostic
@pytest.mark.asyncio
async def test_fetch_public_holidays_propagates_connection_errors() -> None:
    """Connection failures surface unchanged."""

    def _refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(_refuse)) as client:
        with pytest.raises(httpx.ConnectError, match="connection refused"):
            await fetch_public_holidays(2024, "US", client=client)


@pytest.mark.os_agnostic
@pytest.mark.asyncio
async def test_fetch_public_holidays_propagates_parse_errors(holiday_api: ClientFactory) -> None:
    """Malformed bodies raise the parser's errors."""
    async with holiday_api(b"not json") as client:
        with pytest.raises(orjson.JSONDecodeError):
            await fetch_public_holidays(2024, "US", client=client)

    async with holiday_api({"unexpected": "object"}) as client:
        with pytest.raises(ValidationError):
            await fetch_public_holidays(2024, "US", client=client)


@pytest.mark.os_agnostic
@pytest.mark.asyncio
async def test_fetch_public_holidays_leaves_caller_client_open(holiday_api: ClientFactory) -> None:
    """A client passed in is reused and not closed."""
    client = holiday_api()
    try:
        await fetch_public_holidays(2024, "US", client=client)
        await fetch_public_holidays(2025, "US", client=client)
        assert not client.is_closed
    finally:
        await client.aclose()


@pytest.mark.os_agnostic
@pytest.mark.asyncio
async def test_fetch_public_holidays_opens_its_own_client_when_none_given(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without a client one is opened for the request and closed afterwards."""
    opened: list[httpx.AsyncClient] = []
    real_client = httpx.AsyncClient

    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[{"date": "2024-01-01", "localName": "New Year's Day"}])

    def _client_factory(**kwargs: Any) -> httpx.AsyncClient:
        client = real_client(transport=httpx.MockTransport(_handler), **kwargs)
        opened.append(client)
        return client

    monkeypatch.setattr(httpx, "AsyncClient", _client_factory)

    records = await fetch_public_holidays(2024, "US")

    assert [record.local_name for record in records] == ["New Year's Day"]
    assert len(opened) == 1
    assert opened[0].is_closed
