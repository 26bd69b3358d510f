"""In-memory adapter implementations for testing.

Lightweight implementations of the application ports that operate entirely
in memory -- no console stream, no filesystem, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.console` - :class:`RecordingWriter` console spy
    * :mod:`.logging` - No-op logging initializer
    * :mod:`.storage` - :class:`FileSpy` file writer
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import display_config_in_memory, get_config_in_memory
from .console import PrintedLine, RecordingWriter
from .logging import init_logging_in_memory
from .storage import FileSpy

# Static conformance assertions
if TYPE_CHECKING:
    from hello_world_api.application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        StyledOutput,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_writer: StyledOutput = RecordingWriter()

__all__ = [
    "FileSpy",
    "PrintedLine",
    "RecordingWriter",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
