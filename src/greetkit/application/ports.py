"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function.  Existing module-level functions
satisfy these protocols automatically via structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters.  Infrastructure types (``Config``,
    ``HolidaySettings``) are imported under ``TYPE_CHECKING`` only so that
    import-linter layer contracts remain satisfied at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat
from ..domain.holidays import HolidayRecord

if TYPE_CHECKING:
    import httpx
    from lib_layered_config import Config

    from ..adapters.holidays.settings import HolidaySettings


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class FetchPublicHolidays(Protocol):
    """Fetch every public holiday of one country and year."""

    async def __call__(
        self,
        year: int,
        country_code: str,
        *,
        settings: HolidaySettings | None = ...,
        client: httpx.AsyncClient | None = ...,
    ) -> list[HolidayRecord]: ...


class LoadHolidaySettingsFromDict(Protocol):
    """Load HolidaySettings from a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> HolidaySettings: ...


__all__ = [
    "DisplayConfig",
    "FetchPublicHolidays",
    "GetConfig",
    "InitLogging",
    "LoadHolidaySettingsFromDict",
]
