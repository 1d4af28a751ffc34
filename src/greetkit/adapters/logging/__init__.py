"""Logging adapter: starts lib_log_rich from the ``[lib_log_rich]`` section."""

from __future__ import annotations

from .setup import LoggingConfigModel, init_logging

__all__ = ["LoggingConfigModel", "init_logging"]
