"""Enumerations shared by the domain and the CLI."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """How ``greetkit config`` renders the configuration.

    Being a ``str`` subclass, members compare equal to Click's choice strings.

    Example:
        >>> OutputFormat("json") is OutputFormat.JSON
        True
        >>> OutputFormat.HUMAN == "human"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = ["OutputFormat"]
