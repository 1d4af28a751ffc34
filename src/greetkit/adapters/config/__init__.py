"""Configuration adapter built on lib_layered_config.

``loader`` reads and caches the layered configuration, ``overrides`` merges
``--set`` values into it and ``display`` prints it.
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides, parse_override

__all__ = ["apply_overrides", "display_config", "get_config", "get_default_config_path", "parse_override"]
