"""Public package surface: the greeting store, its value types and metadata.

Example:
    >>> from hello_world_api import StorageTarget, create_greeting_store
    >>> store = create_greeting_store("/tmp")  # doctest: +SKIP
    >>> store.store_data("Some test data...", StorageTarget.FILE).ok  # doctest: +SKIP
    True
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application
from .application.greeting_store import GreetingStore

# Composition exports (wired adapters)
from .composition import create_greeting_store, get_config

# Domain exports
from .domain.behaviors import CANONICAL_GREETING, build_greeting
from .domain.enums import EncodingStyle, ErrorKind, MessageStyle, OperationStatus, StorageTarget
from .domain.errors import ConfigurationError, EncryptionError, ErrorLog, ErrorRecord, MessageTooLargeError
from .domain.results import OperationResult

__all__ = [
    "CANONICAL_GREETING",
    "ConfigurationError",
    "EncodingStyle",
    "EncryptionError",
    "ErrorKind",
    "ErrorLog",
    "ErrorRecord",
    "GreetingStore",
    "MessageStyle",
    "MessageTooLargeError",
    "OperationResult",
    "OperationStatus",
    "StorageTarget",
    "build_greeting",
    "create_greeting_store",
    "get_config",
    "print_info",
]
