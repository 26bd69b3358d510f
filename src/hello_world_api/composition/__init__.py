"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.config.settings import StoreSettings, load_store_settings

# Console
from ..adapters.console.styled_writer import create_writer

# Ciphers
from ..adapters.crypto.container_cipher import encrypt_container
from ..adapters.crypto.message_cipher import encrypt_message

# Logging services
from ..adapters.logging.setup import init_logging

# Storage
from ..adapters.storage.document import render_document
from ..adapters.storage.files import default_storage_directory, write_bytes
from ..application.greeting_store import GreetingStore

if TYPE_CHECKING:
    from ..adapters.memory import FileSpy, RecordingWriter
    from ..application.ports import (
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

    # pyright checks each adapter against its Protocol here.
    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_load_store_settings: LoadStoreSettings = load_store_settings
    _assert_init_logging: InitLogging = init_logging
    _assert_create_writer: CreateWriter = create_writer
    _assert_encrypt_message: EncryptMessage = encrypt_message
    _assert_encrypt_container: EncryptContainer = encrypt_container
    _assert_render_document: RenderDocument = render_document
    _assert_write_bytes: WriteBytes = write_bytes
    _assert_default_storage_directory: DefaultStorageDirectory = default_storage_directory


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    load_store_settings: LoadStoreSettings
    init_logging: InitLogging
    create_writer: CreateWriter
    encrypt_message: EncryptMessage
    encrypt_container: EncryptContainer
    render_document: RenderDocument
    write_bytes: WriteBytes
    default_storage_directory: DefaultStorageDirectory

    def create_greeting_store(
        self,
        directory: str | Path | None = None,
        *,
        settings: StoreSettings | None = None,
        writer: StyledOutput | None = None,
    ) -> GreetingStore:
        """Build a :class:`GreetingStore` from these services and ``settings``.

        ``directory`` wins over ``settings.storage.directory``; when both are
        unset the store falls back to ``default_storage_directory()``.
        """
        settings = settings if settings is not None else StoreSettings()
        if writer is None:
            writer = self.create_writer(
                timestamp_format=settings.console.timestamp_format,
                force_color=settings.console.force_color,
                no_color=settings.console.no_color,
            )
        return GreetingStore(
            directory if directory is not None else settings.storage.directory,
            writer=writer,
            encrypt_message=self.encrypt_message,
            encrypt_container=self.encrypt_container,
            render_document=self.render_document,
            write_bytes=self.write_bytes,
            default_directory=self.default_storage_directory,
            secret=settings.container.to_secret(),
            key_size=settings.greeting.key_size,
            encoding=settings.greeting.encoding,
        )


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        load_store_settings=load_store_settings,
        init_logging=init_logging,
        create_writer=create_writer,
        encrypt_message=encrypt_message,
        encrypt_container=encrypt_container,
        render_document=render_document,
        write_bytes=write_bytes,
        default_storage_directory=default_storage_directory,
    )


def build_testing(
    *,
    writer: RecordingWriter | None = None,
    files: FileSpy | None = None,
) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    The ciphers and document renderer stay real; console, filesystem,
    configuration and logging are replaced.

    Args:
        writer: Spy returned by every ``create_writer`` call. A fresh one is
            created when omitted.
        files: Spy standing in for the filesystem. A fresh one is created
            when omitted.
    """
    from ..adapters.memory import (
        FileSpy,
        RecordingWriter,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    recording = writer if writer is not None else RecordingWriter()
    file_spy = files if files is not None else FileSpy()

    def _create_recording_writer(
        *, timestamp_format: str = "", force_color: bool = False, no_color: bool = False
    ) -> RecordingWriter:
        return recording

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        load_store_settings=load_store_settings,
        init_logging=init_logging_in_memory,
        create_writer=_create_recording_writer,
        encrypt_message=encrypt_message,
        encrypt_container=encrypt_container,
        render_document=render_document,
        write_bytes=file_spy.write_bytes,
        default_storage_directory=file_spy.default_storage_directory,
    )


def create_greeting_store(
    directory: str | Path | None = None,
    *,
    services: AppServices | None = None,
    settings: StoreSettings | None = None,
    writer: StyledOutput | None = None,
) -> GreetingStore:
    """Build a production-wired :class:`GreetingStore` printing to stdout.

    Example:
        >>> store = create_greeting_store("/tmp")
        >>> store.file_path.name
        'config.toml'
    """
    services = services if services is not None else build_production()
    return services.create_greeting_store(directory, settings=settings, writer=writer)


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "create_greeting_store",
    "display_config",
    "get_config",
    "init_logging",
]
