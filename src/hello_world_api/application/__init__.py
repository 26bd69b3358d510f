"""Application layer - use cases and port definitions.

Contents:
    * :mod:`.ports` - Protocol definitions for adapter functions
    * :mod:`.greeting_store` - The GreetingStore use case
    * :mod:`.demo` - The scripted demo sequence
"""

from __future__ import annotations

from .demo import DemoBanner, run_demo
from .greeting_store import GreetingStore
from .ports import (
    CreateWriter,
    DefaultStorageDirectory,
    DisplayConfig,
    EncryptContainer,
    EncryptMessage,
    GetConfig,
    InitLogging,
    LoadStoreSettings,
    RenderDocument,
    StyledOutput,
    WriteBytes,
)

__all__ = [
    "CreateWriter",
    "DefaultStorageDirectory",
    "DemoBanner",
    "DisplayConfig",
    "EncryptContainer",
    "EncryptMessage",
    "GetConfig",
    "GreetingStore",
    "InitLogging",
    "LoadStoreSettings",
    "RenderDocument",
    "StyledOutput",
    "WriteBytes",
    "run_demo",
]
