"""Greeting use cases - callback-style and awaitable entry points.

Both functions delegate validation to :func:`greetkit.domain.behaviors.build_greeting`
and only differ in how they hand the outcome back to the caller.

Contents:
    * :func:`greet` - Callback convention ``callback(error, greeting)``.
    * :func:`greet_async` - Future that resolves to the greeting or fails.

System Role:
    Delays are scheduled on the running asyncio event loop. Nothing here
    starts threads or blocks the loop.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from ..domain.behaviors import GreetingResult, build_greeting
from ..domain.errors import CallbackNotCallableError

GreetingCallback = Callable[[Exception | None, str | None], object]
"""Signature expected by :func:`greet`: ``(error, greeting)``."""

CALLBACK_NOT_CALLABLE_MESSAGE = "the callback argument must be callable"


def _is_delay(value: object) -> bool:
    """Return True for real numbers usable as a delay (bool excluded)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _seconds(delay_ms: float) -> float:
    return max(delay_ms, 0) / 1000


def greet(name: object, callback: GreetingCallback, delay_ms: float | None = None) -> asyncio.TimerHandle | None:
    """Invoke ``callback(error, greeting)`` once with the greeting for ``name``.

    The name is validated immediately. Without a delay the callback runs
    before this function returns. With a numeric delay the invocation is
    scheduled on the running event loop and happens on a later turn.

    Args:
        name: Name to greet; must be a non-blank string.
        callback: Receives ``(None, greeting)`` on success or
            ``(error, None)`` when the name is rejected.
        delay_ms: Milliseconds to defer the callback by. Anything that is not
            an int or float means "call synchronously".

    Returns:
        The timer handle when the callback was scheduled, otherwise None.

    Raises:
        CallbackNotCallableError: If ``callback`` is not callable. Raised
            before validation and before anything is scheduled.
        RuntimeError: If a delay is requested without a running event loop.

    Example:
        >>> seen = []
        >>> greet(" X ", lambda err, text: seen.append((err, text)))
        >>> seen
        [(None, 'Hello, X!')]
    """
    if not callable(callback):
        raise CallbackNotCallableError(CALLBACK_NOT_CALLABLE_MESSAGE)

    result = build_greeting(name)

    if _is_delay(delay_ms):
        loop = asyncio.get_running_loop()
        return loop.call_later(_seconds(delay_ms), callback, result.error, result.greeting)  # type: ignore[arg-type]

    callback(result.error, result.greeting)
    return None


def _settle(future: asyncio.Future[str], result: GreetingResult) -> None:
    if future.done():
        return
    if result.error is not None:
        future.set_exception(result.error)
    else:
        future.set_result(result.greeting)  # type: ignore[arg-type]


def greet_async(name: object, delay_ms: float = 0) -> asyncio.Future[str]:
    """Return a future that settles with the greeting for ``name``.

    Validation happens at call time, but the outcome (success or failure)
    is only published once ``delay_ms`` has elapsed. A delay of 0 still
    settles on a later loop turn.

    Args:
        name: Name to greet; must be a non-blank string.
        delay_ms: Milliseconds to wait before settling. Defaults to 0.

    Returns:
        Future resolving to ``"Hello, <name>!"`` or failing with
        :class:`~greetkit.domain.errors.NameTypeError` /
        :class:`~greetkit.domain.errors.BlankNameError`.

    Raises:
        RuntimeError: If called without a running event loop.

    Example:
        >>> import asyncio
        >>> async def demo() -> str:
        ...     return await greet_async("Ann")
        >>> asyncio.run(demo())
        'Hello, Ann!'
    """
    result = build_greeting(name)
    loop = asyncio.get_running_loop()
    future: asyncio.Future[str] = loop.create_future()
    loop.call_later(_seconds(delay_ms), _settle, future, result)
    return future


__all__ = [
    "CALLBACK_NOT_CALLABLE_MESSAGE",
    "GreetingCallback",
    "greet",
    "greet_async",
]
