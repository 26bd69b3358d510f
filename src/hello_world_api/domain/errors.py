"""Domain exceptions, the tagged error record, and the append-only error log."""

from __future__ import annotations

import errno
from collections.abc import Iterator
from dataclasses import dataclass

from .enums import ErrorKind


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when a configuration section cannot be parsed into its settings
    model. Typically caught at CLI boundaries to provide user-friendly error
    messages.

    Example:
        >>> err = ConfigurationError("[greeting] key_size must be >= 1024")
        >>> str(err)
        '[greeting] key_size must be >= 1024'
    """


class EncryptionError(Exception):
    """A cipher rejected its input."""


class MessageTooLargeError(EncryptionError):
    """The plaintext exceeds what the asymmetric key can encrypt in one block.

    Example:
        >>> err = MessageTooLargeError(size=200, capacity=117)
        >>> str(err)
        'message of 200 bytes exceeds the 117 byte capacity of the key'
        >>> isinstance(err, EncryptionError)
        True
    """

    def __init__(self, *, size: int, capacity: int) -> None:
        super().__init__(f"message of {size} bytes exceeds the {capacity} byte capacity of the key")
        self.size = size
        self.capacity = capacity


@dataclass(frozen=True, slots=True)
class ErrorRecord:
    """One recorded failure.

    Attributes:
        kind: Tagged failure category.
        operation: Name of the operation that failed (``print_greeting`` ...).
        message: Human-readable detail taken from the original exception.
        exception: The original exception, kept for later inspection.
    """

    kind: ErrorKind
    operation: str
    message: str
    exception: BaseException | None = None


def classify_exception(exc: BaseException) -> ErrorKind:
    """Map a caught exception onto the :class:`ErrorKind` taxonomy.

    Example:
        >>> classify_exception(PermissionError("denied"))
        <ErrorKind.ACCESS_DENIED: 'access_denied'>
        >>> classify_exception(FileNotFoundError("missing"))
        <ErrorKind.DIRECTORY_NOT_FOUND: 'directory_not_found'>
        >>> classify_exception(OSError(errno.ENAMETOOLONG, "File name too long"))
        <ErrorKind.PATH_TOO_LONG: 'path_too_long'>
        >>> classify_exception(MessageTooLargeError(size=2, capacity=1))
        <ErrorKind.ENCRYPTION_FAILURE: 'encryption_failure'>
        >>> classify_exception(RuntimeError("boom"))
        <ErrorKind.UNKNOWN: 'unknown'>
    """
    if isinstance(exc, EncryptionError):
        return ErrorKind.ENCRYPTION_FAILURE
    if isinstance(exc, PermissionError):
        return ErrorKind.ACCESS_DENIED
    if isinstance(exc, OSError) and exc.errno == errno.ENAMETOOLONG:
        return ErrorKind.PATH_TOO_LONG
    if isinstance(exc, (FileNotFoundError, NotADirectoryError)):
        return ErrorKind.DIRECTORY_NOT_FOUND
    return ErrorKind.UNKNOWN


class ErrorLog:
    """Ordered, append-only record of failures owned by one store instance.

    There is no ``remove``/``clear``; a fresh log comes only with
    a fresh store.

    Example:
        >>> log = ErrorLog()
        >>> log.append(ErrorRecord(ErrorKind.UNKNOWN, "demo", "boom"))
        >>> len(log), log.kinds()
        (1, [<ErrorKind.UNKNOWN: 'unknown'>])
    """

    __slots__ = ("_records",)

    def __init__(self) -> None:
        self._records: list[ErrorRecord] = []

    def append(self, record: ErrorRecord) -> None:
        self._records.append(record)

    def kinds(self) -> list[ErrorKind]:
        return [record.kind for record in self._records]

    def last(self) -> ErrorRecord | None:
        return self._records[-1] if self._records else None

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ErrorRecord]:
        return iter(tuple(self._records))

    def __getitem__(self, index: int) -> ErrorRecord:
        return self._records[index]

    def __bool__(self) -> bool:
        return bool(self._records)

    def __repr__(self) -> str:
        return f"ErrorLog({[record.kind.value for record in self._records]!r})"


__all__ = [
    "ConfigurationError",
    "EncryptionError",
    "ErrorLog",
    "ErrorRecord",
    "MessageTooLargeError",
    "classify_exception",
]
