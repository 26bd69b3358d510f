"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Greeting defaults and report texts
    * :mod:`.document` - The persisted configuration document
    * :mod:`.enums` - Domain enumerations (MessageStyle, StorageTarget, ErrorKind, ...)
    * :mod:`.errors` - Exception types, ErrorRecord, ErrorLog
    * :mod:`.results` - OperationResult
    * :mod:`.storage` - StoragePaths and ContainerSecret
    * :mod:`.styles` - Glyph/colour table
    * :mod:`.text` - Encoding and base64 helpers
"""

from __future__ import annotations

from .behaviors import CANONICAL_GREETING, build_greeting
from .document import ConfigurationDocument, build_configuration_document
from .enums import EncodingStyle, ErrorKind, MessageStyle, OperationStatus, OutputFormat, StorageTarget
from .errors import (
    ConfigurationError,
    EncryptionError,
    ErrorLog,
    ErrorRecord,
    MessageTooLargeError,
    classify_exception,
)
from .results import OperationResult
from .storage import ContainerSecret, StoragePaths
from .styles import STYLE_TABLE, StyleSpec, resolve_style

__all__ = [
    # Behaviors
    "CANONICAL_GREETING",
    "build_greeting",
    # Document
    "ConfigurationDocument",
    "build_configuration_document",
    # Enums
    "EncodingStyle",
    "ErrorKind",
    "MessageStyle",
    "OperationStatus",
    "OutputFormat",
    "StorageTarget",
    # Errors
    "ConfigurationError",
    "EncryptionError",
    "ErrorLog",
    "ErrorRecord",
    "MessageTooLargeError",
    "classify_exception",
    # Results
    "OperationResult",
    # Storage
    "ContainerSecret",
    "StoragePaths",
    # Styles
    "STYLE_TABLE",
    "StyleSpec",
    "resolve_style",
]
