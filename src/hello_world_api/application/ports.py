"""Application ports - Protocol definitions for adapter functions and objects.

Each callable Protocol defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function. Existing module-level functions
satisfy these protocols automatically via structural subtyping (PEP 544).
:class:`StyledOutput` is the one object-shaped port: the console writer.

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``,
    ``StoreSettings``) are imported under ``TYPE_CHECKING`` only so that
    import-linter layer contracts remain satisfied at runtime.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from ..domain.document import ConfigurationDocument
from ..domain.enums import EncodingStyle, MessageStyle, OutputFormat
from ..domain.storage import ContainerSecret

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.settings import StoreSettings


@runtime_checkable
class StyledOutput(Protocol):
    """Render one decorated line to a console."""

    def print(
        self,
        message: str,
        accents: bool = ...,
        timestamp: bool = ...,
        whole_line: bool = ...,
        style: MessageStyle = ...,
    ) -> str: ...


class CreateWriter(Protocol):
    """Build a :class:`StyledOutput` from console settings."""

    def __call__(
        self, *, timestamp_format: str = ..., force_color: bool = ..., no_color: bool = ...
    ) -> StyledOutput: ...


class EncryptMessage(Protocol):
    """Asymmetrically encrypt a display string into base64 text."""

    def __call__(self, message: str, *, key_size: int = ..., encoding: EncodingStyle = ...) -> str: ...


class EncryptContainer(Protocol):
    """Symmetrically encrypt a serialized document with password-derived key material."""

    def __call__(self, plain: bytes, *, secret: ContainerSecret) -> bytes: ...


class RenderDocument(Protocol):
    """Serialize a configuration document into bytes."""

    def __call__(self, document: ConfigurationDocument) -> bytes: ...


class WriteBytes(Protocol):
    """Create or overwrite ``path`` with ``payload``."""

    def __call__(self, path: Path, payload: bytes) -> None: ...


class DefaultStorageDirectory(Protocol):
    """Return the directory used when a store is built without one."""

    def __call__(self) -> Path: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class LoadStoreSettings(Protocol):
    """Parse the greeting/storage/container/console sections of a Config."""

    def __call__(self, config: Config) -> StoreSettings: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "CreateWriter",
    "DefaultStorageDirectory",
    "DisplayConfig",
    "EncryptContainer",
    "EncryptMessage",
    "GetConfig",
    "InitLogging",
    "LoadStoreSettings",
    "RenderDocument",
    "StyledOutput",
    "WriteBytes",
]
