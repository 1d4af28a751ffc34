"""Adapters connecting greetkit to the outside world.

``cli`` (Click commands), ``config`` (lib_layered_config), ``holidays``
(Nager.Date over httpx), ``logging`` (lib_log_rich) and ``memory`` (in-process
stand-ins used by tests).
"""

from __future__ import annotations

__all__: list[str] = []
