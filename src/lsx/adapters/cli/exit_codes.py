"""POSIX-conventional exit codes for CLI error paths.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
    * :func:`exit_code_for` - map a configuration source failure to its code.
"""

from __future__ import annotations

from enum import IntEnum

from lsx.domain.errors import (
    ConfigSourceError,
    MalformedConfigSourceError,
    MissingConfigSourceError,
    UnreadableConfigSourceError,
)


class ExitCode(IntEnum):
    """POSIX-conventional exit codes for CLI error paths.

    Values follow sysexits.h and errno conventions where applicable:

    * 0–1: generic success / failure
    * 2, 13: errno-derived codes (ENOENT, EACCES)
    * 22: EINVAL
    * 78: EX_CONFIG (sysexits.h)

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    FILE_NOT_FOUND = 2
    PERMISSION_DENIED = 13
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78


def exit_code_for(exc: ConfigSourceError) -> ExitCode:
    """Return the exit code reported for a configuration source failure.

    Example:
        >>> exit_code_for(MissingConfigSourceError("missing config"))
        <ExitCode.CONFIG_ERROR: 78>
    """
    if isinstance(exc, UnreadableConfigSourceError):
        if isinstance(exc.__cause__, PermissionError):
            return ExitCode.PERMISSION_DENIED
        if isinstance(exc.__cause__, FileNotFoundError):
            return ExitCode.FILE_NOT_FOUND
        return ExitCode.GENERAL_ERROR
    if isinstance(exc, (MissingConfigSourceError, MalformedConfigSourceError)):
        return ExitCode.CONFIG_ERROR
    return ExitCode.GENERAL_ERROR


__all__ = ["ExitCode", "exit_code_for"]
