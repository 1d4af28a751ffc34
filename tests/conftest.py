"""Shared pytest fixtures for library, CLI and module-entry tests.

Fixtures use descriptive names that read as plain English and are picked up
implicitly through pytest's conftest discovery.
"""

from __future__ import annotations

import contextlib
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import httpx
import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from greetkit.domain.holidays import HolidayRecord

if TYPE_CHECKING:
    from greetkit.adapters.memory.holidays import HolidayStub
    from greetkit.composition import AppServices

_COVERAGE_BASENAME = ".coverage.greetkit"


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete leftover SQLite database and journal files from crashed runs."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Keep the coverage database on a local temp directory.

    Runs before ``pytest-cov`` creates its ``Coverage()`` object so the
    ``COVERAGE_FILE`` value applies however pytest is invoked.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


def _load_dotenv() -> None:
    """Load .env file when it exists for integration test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))

US_HOLIDAYS_2024: list[dict[str, Any]] = [
    {"date": "2024-01-01", "localName": "New Year's Day", "name": "New Year's Day", "countryCode": "US"},
    {"date": "2024-07-04", "localName": "Independence Day", "name": "Independence Day", "countryCode": "US"},
    {"date": "2024-11-11", "localName": "Veterans Day", "name": "Veterans Day", "countryCode": "US"},
    {"date": "2024-11-28", "localName": "Thanksgiving Day", "name": "Thanksgiving Day", "countryCode": "US"},
]


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for clean output; log records go to stderr.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from greetkit.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before the test.

    Only clears before, not after, because a test may monkeypatch
    ``get_config`` and lose its ``cache_clear`` attribute.
    """
    from greetkit.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def us_holiday_records() -> list[HolidayRecord]:
    """Domain records mirroring ``US_HOLIDAYS_2024``."""
    return [
        HolidayRecord(date=item["date"], local_name=item["localName"], name=item["name"], country_code="US")
        for item in US_HOLIDAYS_2024
    ]


@pytest.fixture
def holiday_api() -> Callable[..., httpx.AsyncClient]:
    """Return a factory for AsyncClients answered by an in-process handler.

    The factory takes the response body (JSON-serialisable or raw bytes), an
    optional status code and an optional list collecting the requests seen.
    """

    def _build(
        body: Any = None,
        *,
        status_code: int = 200,
        seen: list[httpx.Request] | None = None,
    ) -> httpx.AsyncClient:
        payload = US_HOLIDAYS_2024 if body is None else body

        def _handler(request: httpx.Request) -> httpx.Response:
            if seen is not None:
                seen.append(request)
            if isinstance(payload, bytes):
                return httpx.Response(status_code, content=payload)
            return httpx.Response(status_code, json=payload)

        return httpx.AsyncClient(transport=httpx.MockTransport(_handler))

    return _build


@dataclass
class HolidayCliContext:
    """Services factory plus the stub answering holiday lookups."""

    factory: Callable[[], Any]
    stub: HolidayStub


@pytest.fixture
def holiday_cli_context(
    clear_config_cache: None,
) -> Callable[..., HolidayCliContext]:
    """Create CLI test context with canned holidays and injected config.

    Keeps production logging and display while replacing the config loader
    and the holiday source, so no file or network I/O happens.

    Example:
        def test_lookup(cli_runner, holiday_cli_context, us_holiday_records) -> None:
            ctx = holiday_cli_context(us_holiday_records)
            result = cli_runner.invoke(cli, ["holiday", "US", "--date", "2024-07-04"], obj=ctx.factory)
            assert ctx.stub.requests == [(2024, "US")]
    """
    from greetkit.adapters.memory.holidays import HolidayStub as HolidayStubImpl
    from greetkit.composition import AppServices, build_production

    def _create(
        records: list[HolidayRecord] | None = None,
        *,
        config_data: dict[str, Any] | None = None,
        raise_exception: Exception | None = None,
    ) -> HolidayCliContext:
        stub = HolidayStubImpl(records=list(records or []), raise_exception=raise_exception)
        config = Config(config_data or {}, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
            fetch_public_holidays=stub.fetch_public_holidays,
            load_holiday_settings_from_dict=prod.load_holiday_settings_from_dict,
        )
        return HolidayCliContext(factory=lambda: test_services, stub=stub)

    return _create


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Create a services factory whose config loader returns ``config_data``."""
    from greetkit.composition import AppServices, build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
            fetch_public_holidays=prod.fetch_public_holidays,
            load_holiday_settings_from_dict=prod.load_holiday_settings_from_dict,
        )
        return lambda: test_services

    return _create
