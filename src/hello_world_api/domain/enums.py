"""Type-safe domain enums for console styles, encodings, storage, and errors."""

from __future__ import annotations

from enum import Enum


class MessageStyle(str, Enum):
    """Severity-like tag selecting the glyph and colour of a console line.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        GENERAL: Neutral information, grey ``-`` accent.
        NOTICE: Something worth noticing, cyan ``*`` accent.
        SUCCESS: An operation succeeded, green ``+`` accent.
        WARNING: Degraded but not failed, yellow ``!`` accent.
        ERROR: An operation failed, red ``x`` accent.
        NONE: Plain output without accent or colour.

    Example:
        >>> MessageStyle.SUCCESS.value
        'success'
        >>> MessageStyle.NONE == "none"
        True
    """

    GENERAL = "general"
    NOTICE = "notice"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    NONE = "none"


class EncodingStyle(str, Enum):
    """Text encoding used when converting between strings and raw bytes.

    ``UNICODE`` and ``BIG_ENDIAN_UNICODE`` are the two UTF-16 byte orders;
    ``UTF32`` is little-endian. None of the codecs emit a byte order mark.

    Example:
        >>> EncodingStyle.UNICODE.codec
        'utf-16-le'
        >>> EncodingStyle("ascii") is EncodingStyle.ASCII
        True
    """

    DEFAULT = "default"
    ASCII = "ascii"
    UTF7 = "utf7"
    UTF8 = "utf8"
    UTF32 = "utf32"
    UNICODE = "unicode"
    BIG_ENDIAN_UNICODE = "big_endian_unicode"

    @property
    def codec(self) -> str:
        """Return the Python codec name backing this encoding style."""
        return _CODECS[self]


_CODECS: dict[EncodingStyle, str] = {
    EncodingStyle.DEFAULT: "utf-8",
    EncodingStyle.ASCII: "ascii",
    EncodingStyle.UTF7: "utf-7",
    EncodingStyle.UTF8: "utf-8",
    EncodingStyle.UTF32: "utf-32-le",
    EncodingStyle.UNICODE: "utf-16-le",
    EncodingStyle.BIG_ENDIAN_UNICODE: "utf-16-be",
}


class StorageTarget(str, Enum):
    """Where :meth:`GreetingStore.store_data` persists the configuration document.

    Attributes:
        FILE: Plaintext TOML document.
        CONTAINER: AES-encrypted document blob.
        DATABASE: Not implemented; always answers with a warning.

    Example:
        >>> StorageTarget.CONTAINER.value
        'container'
    """

    FILE = "file"
    CONTAINER = "container"
    DATABASE = "database"


class ErrorKind(str, Enum):
    """Tagged failure categories recorded in an :class:`ErrorLog`.

    Example:
        >>> ErrorKind.ACCESS_DENIED.value
        'access_denied'
    """

    OUTPUT_FAILURE = "output_failure"
    ENCRYPTION_FAILURE = "encryption_failure"
    PATH_TOO_LONG = "path_too_long"
    DIRECTORY_NOT_FOUND = "directory_not_found"
    ACCESS_DENIED = "access_denied"
    UNKNOWN = "unknown"


class OperationStatus(str, Enum):
    """Outcome tag of an :class:`OperationResult`."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    UNSUPPORTED = "unsupported"


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "EncodingStyle",
    "ErrorKind",
    "MessageStyle",
    "OperationStatus",
    "OutputFormat",
    "StorageTarget",
]
