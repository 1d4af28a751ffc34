"""Public package surface: palindrome test, greetings, and holiday lookup.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: validation and pure helpers
- Application exports: callback and awaitable greeting entry points
- Composition exports: the holiday lookup wired to the HTTP adapter
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.greeting import greet, greet_async

# Composition exports (wired adapters)
from .composition import get_config, holiday

# Domain exports
from .domain.behaviors import (
    GreetingResult,
    build_greeting,
    is_palindrome,
)
from .domain.errors import BlankNameError, CallbackNotCallableError, NameTypeError

__all__ = [
    "BlankNameError",
    "CallbackNotCallableError",
    "GreetingResult",
    "NameTypeError",
    "build_greeting",
    "get_config",
    "greet",
    "greet_async",
    "holiday",
    "is_palindrome",
    "print_info",
]
