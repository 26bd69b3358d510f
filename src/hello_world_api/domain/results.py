"""Explicit result type returned by every :class:`GreetingStore` operation."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import ErrorKind, MessageStyle, OperationStatus
from .errors import ErrorRecord


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Tagged outcome of one store operation.

    Attributes:
        status: Succeeded, failed, or intentionally unsupported.
        message: The user-facing line that was (or should have been) printed.
        style: Console style used for ``message``.
        error: The recorded failure when ``status`` is ``FAILED``.
        output: Text produced by the operation (e.g. the encrypted greeting).

    Example:
        >>> result = OperationResult.success("Stored data into a file!")
        >>> result.ok, result.style
        (True, <MessageStyle.SUCCESS: 'success'>)
    """

    status: OperationStatus
    message: str
    style: MessageStyle
    error: ErrorRecord | None = None
    output: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is OperationStatus.SUCCEEDED

    @property
    def error_kind(self) -> ErrorKind | None:
        return self.error.kind if self.error is not None else None

    @classmethod
    def success(cls, message: str, *, output: str | None = None) -> OperationResult:
        return cls(OperationStatus.SUCCEEDED, message, MessageStyle.SUCCESS, output=output)

    @classmethod
    def failure(cls, message: str, error: ErrorRecord) -> OperationResult:
        return cls(OperationStatus.FAILED, message, MessageStyle.ERROR, error=error)

    @classmethod
    def unsupported(cls, message: str) -> OperationResult:
        return cls(OperationStatus.UNSUPPORTED, message, MessageStyle.WARNING)


__all__ = ["OperationResult"]
