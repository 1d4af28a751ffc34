"""Holiday API settings model and loader.

Provides the HolidaySettings Pydantic model for validated, immutable endpoint
settings and the loader function to create it from configuration dictionaries.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final, cast

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_BASE_URL: Final[str] = "https://date.nager.at/api/v2"


class HolidaySettings(BaseModel):
    """Validated, immutable holiday API settings.

    Example:
        >>> HolidaySettings().base_url
        'https://date.nager.at/api/v2'
        >>> HolidaySettings(base_url="http://localhost:8080/api/v2/").base_url
        'http://localhost:8080/api/v2'
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL

    @field_validator("base_url", mode="before")
    @classmethod
    def _normalise_base_url(cls, v: Any) -> Any:
        """Strip whitespace and trailing slashes; empty strings mean the default.

        Examples:
            >>> HolidaySettings._normalise_base_url("")
            'https://date.nager.at/api/v2'
            >>> HolidaySettings._normalise_base_url("ftp://example.com")  # doctest: +IGNORE_EXCEPTION_DETAIL
            Traceback (most recent call last):
            ...
            ValueError: base_url must start with http:// or https://
        """
        if not isinstance(v, str):
            return v
        cleaned = v.strip().rstrip("/")
        if not cleaned:
            return DEFAULT_BASE_URL
        if not cleaned.startswith(("http://", "https://")):
            raise ValueError(f"base_url must start with http:// or https://, got {v!r}")
        return cleaned

    def public_holidays_url(self, year: int, country_code: str) -> str:
        """Return the endpoint listing one country's holidays for a year.

        Example:
            >>> HolidaySettings().public_holidays_url(2024, "US")
            'https://date.nager.at/api/v2/PublicHolidays/2024/US'
        """
        return f"{self.base_url}/PublicHolidays/{year}/{country_code}"


def load_holiday_settings_from_dict(config_dict: Mapping[str, Any]) -> HolidaySettings:
    """Load HolidaySettings from a configuration dictionary.

    Bridges lib_layered_config's dictionary output with the typed
    HolidaySettings Pydantic model.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.
            Expected to have a 'holidays' section.

    Returns:
        Holiday settings with defaults for missing values.

    Example:
        >>> load_holiday_settings_from_dict({"holidays": {"base_url": "https://example.test/v2"}}).base_url
        'https://example.test/v2'
        >>> load_holiday_settings_from_dict({}).base_url
        'https://date.nager.at/api/v2'
    """
    section: Any = config_dict.get("holidays", {})

    # Handle non-dict section (e.g. "holidays": "invalid")
    if not isinstance(section, Mapping):
        return HolidaySettings.model_validate(section)

    return HolidaySettings.model_validate(dict(cast(Mapping[str, Any], section)))


__all__ = [
    "DEFAULT_BASE_URL",
    "HolidaySettings",
    "load_holiday_settings_from_dict",
]
