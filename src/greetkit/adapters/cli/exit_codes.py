"""POSIX-conventional exit codes for CLI error paths.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes following sysexits.h and errno conventions.

    * 0-1: generic success / failure
    * 22: EINVAL (rejected input, unknown config section)
    * 65: EX_DATAERR (holiday API answered with an unexpected body)
    * 69: EX_UNAVAILABLE (holiday API unreachable or failing)
    * 78: EX_CONFIG (invalid configuration values)

    Example:
        >>> int(ExitCode.SERVICE_UNAVAILABLE)
        69
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    DATA_ERROR = 65
    SERVICE_UNAVAILABLE = 69
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
