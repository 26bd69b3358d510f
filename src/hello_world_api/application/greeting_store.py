"""Greeting display and document persistence with an append-only error log.

Contents:
    * :class:`GreetingStore` - the use case behind ``hello`` and ``store``.

System Role:
    Orchestrates domain values and injected ports. Every operation catches its
    own failures, appends exactly one :class:`ErrorRecord`, reports through the
    :class:`StyledOutput` port and returns an :class:`OperationResult`; nothing
    is raised back to the caller.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..domain.behaviors import (
    DEFAULT_GREETING_KEY_SIZE,
    MSG_ENCRYPTION_FAILURE,
    MSG_GREETING_FAILURE,
    MSG_NO_DATABASE,
    MSG_OUTPUT_FAILURE,
    build_greeting,
    storage_failure_message,
    stored_message,
)
from ..domain.document import build_configuration_document
from ..domain.enums import EncodingStyle, ErrorKind, MessageStyle, StorageTarget
from ..domain.errors import EncryptionError, ErrorLog, ErrorRecord, classify_exception
from ..domain.results import OperationResult
from ..domain.storage import ContainerSecret, StoragePaths
from .ports import (
    DefaultStorageDirectory,
    EncryptContainer,
    EncryptMessage,
    RenderDocument,
    StyledOutput,
    WriteBytes,
)

logger = logging.getLogger(__name__)


class GreetingStore:
    """Print greetings and persist data, recording failures instead of raising.

    Args:
        directory: Base directory for ``config.toml`` and ``config.enc``.
            ``None`` falls back to ``default_directory()``.
        writer: Console writer used for every report.
        encrypt_message: Asymmetric cipher for ``print_greeting(encrypt=True)``.
        encrypt_container: Symmetric cipher for :attr:`StorageTarget.CONTAINER`.
        render_document: Serializer for the configuration document.
        write_bytes: File writer (overwrites).
        default_directory: Provider of the fallback base directory.
        secret: Container key material. Defaults to the fixed, weak secret.
        key_size: RSA key length for greeting encryption.
        encoding: Text encoding applied to the greeting before encryption.

    Example:
        >>> from hello_world_api.composition import create_greeting_store
        >>> store = create_greeting_store("/tmp")  # doctest: +SKIP
        >>> store.print_greeting().ok  # doctest: +SKIP
        True
    """

    def __init__(
        self,
        directory: str | Path | None = None,
        *,
        writer: StyledOutput,
        encrypt_message: EncryptMessage,
        encrypt_container: EncryptContainer,
        render_document: RenderDocument,
        write_bytes: WriteBytes,
        default_directory: DefaultStorageDirectory,
        secret: ContainerSecret | None = None,
        key_size: int = DEFAULT_GREETING_KEY_SIZE,
        encoding: EncodingStyle = EncodingStyle.ASCII,
    ) -> None:
        base = Path(directory) if directory is not None else default_directory()
        self._paths = StoragePaths.from_directory(base)
        self._errors = ErrorLog()
        self._writer = writer
        self._encrypt_message = encrypt_message
        self._encrypt_container = encrypt_container
        self._render_document = render_document
        self._write_bytes = write_bytes
        self._secret = secret if secret is not None else ContainerSecret()
        self._key_size = key_size
        self._encoding = encoding

    @property
    def errors(self) -> ErrorLog:
        """Failures recorded by this instance, oldest first."""
        return self._errors

    @property
    def writer(self) -> StyledOutput:
        return self._writer

    @property
    def paths(self) -> StoragePaths:
        return self._paths

    @property
    def file_path(self) -> Path:
        return self._paths.plain_file

    @property
    def container_path(self) -> Path:
        return self._paths.container

    def print_greeting(self, message: str | None = None, encrypt: bool = False) -> OperationResult:
        """Print ``message`` as a timestamped success line, optionally RSA-encrypted first.

        ``None`` prints the canonical ``Hello World!``. The encrypted form is
        base64 text produced with a throw-away key pair, so it can never be
        decrypted.
        """
        operation = "print_greeting"
        message = build_greeting(message)
        try:
            text = (
                self._encrypt_message(message, key_size=self._key_size, encoding=self._encoding)
                if encrypt
                else message
            )
        except EncryptionError as exc:
            return self._fail(operation, ErrorKind.ENCRYPTION_FAILURE, exc, MSG_ENCRYPTION_FAILURE)
        except Exception as exc:
            return self._fail(operation, ErrorKind.UNKNOWN, exc, MSG_GREETING_FAILURE)

        logger.info("Printing greeting", extra={"encrypted": encrypt, "length": len(text)})
        return self._announce(operation, OperationResult.success(text, output=text), MSG_GREETING_FAILURE)

    def store_data(self, data: str, target: StorageTarget | str) -> OperationResult:
        """Persist ``data`` inside a fresh configuration document.

        ``FILE`` writes plaintext TOML, ``CONTAINER`` writes the AES-encrypted
        bytes of the same document, ``DATABASE`` is an explicit unsupported
        stub that only prints a warning.

        Raises:
            ValueError: ``target`` names no :class:`StorageTarget`. This is a
                caller error, raised before any work starts and never recorded.
        """
        operation = "store_data"
        target = StorageTarget(target)
        failure_message = storage_failure_message(target)

        if target is StorageTarget.DATABASE:
            logger.warning("Database storage requested but none is configured")
            return self._announce(operation, OperationResult.unsupported(MSG_NO_DATABASE), failure_message)

        try:
            payload = self._render_document(build_configuration_document(data))
            if target is StorageTarget.CONTAINER:
                payload = self._encrypt_container(payload, secret=self._secret)
                path = self._paths.container
            else:
                path = self._paths.plain_file
            self._write_bytes(path, payload)
        except Exception as exc:
            return self._fail(operation, classify_exception(exc), exc, failure_message)

        logger.info("Stored data", extra={"target": target.value, "path": str(path), "bytes": len(payload)})
        return self._announce(operation, OperationResult.success(stored_message(target)), failure_message)

    def _announce(self, operation: str, result: OperationResult, failure_message: str) -> OperationResult:
        try:
            self._writer.print(result.message, True, True, False, result.style)
        except OSError as exc:
            return self._fail(operation, ErrorKind.OUTPUT_FAILURE, exc, MSG_OUTPUT_FAILURE)
        except Exception as exc:
            return self._fail(operation, ErrorKind.UNKNOWN, exc, failure_message)
        return result

    def _fail(self, operation: str, kind: ErrorKind, exc: BaseException, message: str) -> OperationResult:
        record = ErrorRecord(kind=kind, operation=operation, message=str(exc) or type(exc).__name__, exception=exc)
        self._errors.append(record)
        logger.warning(
            "Operation failed",
            extra={"operation": operation, "kind": kind.value, "detail": record.message},
        )
        try:
            self._writer.print(message, True, True, True, MessageStyle.ERROR)
        except Exception:
            # The failure is already recorded; a second entry would break one-entry-per-failure.
            logger.exception("Could not report failure to the console", extra={"operation": operation})
        return OperationResult.failure(message, record)


__all__ = ["GreetingStore"]
