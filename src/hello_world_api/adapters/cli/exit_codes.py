"""POSIX-conventional exit codes for CLI error paths.

Every ``SystemExit`` raised by a command carries an :class:`ExitCode`, and each
recorded :class:`ErrorKind` maps to exactly one of them.

Signal codes (130, 141, 143) are informational only; ``lib_cli_exit_tools``
translates signals into exit codes itself.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
    * :func:`exit_code_for` - ErrorKind to ExitCode mapping.
"""

from __future__ import annotations

from enum import IntEnum

from hello_world_api.domain.enums import ErrorKind


class ExitCode(IntEnum):
    """POSIX-conventional exit codes for CLI error paths.

    Values follow errno and sysexits.h conventions where applicable:

    * 0-1: generic success / failure
    * 2, 5, 13, 22, 36: ENOENT, EIO, EACCES, EINVAL, ENAMETOOLONG
    * 78: EX_CONFIG (sysexits.h)
    * 128+N: signal N (informational only)

    Example:
        >>> ExitCode.SUCCESS
        <ExitCode.SUCCESS: 0>
        >>> int(ExitCode.NAME_TOO_LONG)
        36
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    FILE_NOT_FOUND = 2
    IO_ERROR = 5
    PERMISSION_DENIED = 13
    INVALID_ARGUMENT = 22
    NAME_TOO_LONG = 36
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


_KIND_TO_EXIT_CODE: dict[ErrorKind, ExitCode] = {
    ErrorKind.OUTPUT_FAILURE: ExitCode.IO_ERROR,
    ErrorKind.ENCRYPTION_FAILURE: ExitCode.INVALID_ARGUMENT,
    ErrorKind.PATH_TOO_LONG: ExitCode.NAME_TOO_LONG,
    ErrorKind.DIRECTORY_NOT_FOUND: ExitCode.FILE_NOT_FOUND,
    ErrorKind.ACCESS_DENIED: ExitCode.PERMISSION_DENIED,
    ErrorKind.UNKNOWN: ExitCode.GENERAL_ERROR,
}


def exit_code_for(kind: ErrorKind) -> ExitCode:
    """Return the exit code reported when ``kind`` was the last recorded failure.

    Example:
        >>> exit_code_for(ErrorKind.ACCESS_DENIED)
        <ExitCode.PERMISSION_DENIED: 13>
    """
    return _KIND_TO_EXIT_CODE[kind]


__all__ = ["ExitCode", "exit_code_for"]
