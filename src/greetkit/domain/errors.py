"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class NameTypeError(TypeError):
    """Name candidate is not a string.

    Returned (not raised) by the greeting validator and delivered through the
    invocation adapter's own failure channel. Inherits from TypeError so
    generic ``except TypeError`` handlers keep working.

    Example:
        >>> from greetkit.domain.errors import NameTypeError
        >>> err = NameTypeError("the name argument must be a string")
        >>> str(err)
        'the name argument must be a string'
        >>> isinstance(err, TypeError)
        True
    """


class BlankNameError(ValueError):
    """Name candidate is empty after stripping surrounding whitespace.

    Example:
        >>> from greetkit.domain.errors import BlankNameError
        >>> err = BlankNameError("the name argument cannot be blank")
        >>> isinstance(err, ValueError)
        True
    """


class CallbackNotCallableError(TypeError):
    """Callback argument handed to :func:`greetkit.greet` cannot be invoked.

    Raised synchronously as a precondition violation, before the name is
    validated or anything is scheduled.

    Example:
        >>> from greetkit.domain.errors import CallbackNotCallableError
        >>> str(CallbackNotCallableError("the callback argument must be callable"))
        'the callback argument must be callable'
    """


__all__ = [
    "BlankNameError",
    "CallbackNotCallableError",
    "NameTypeError",
]
