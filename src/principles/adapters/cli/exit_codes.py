"""POSIX-conventional exit codes for CLI error paths.

Workflow outcomes (validation failed, permission denied, registered) are
reported as text and always exit with ``SUCCESS``. Non-zero codes are
reserved for broken invocations and broken configuration.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes following sysexits.h and errno conventions.

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
