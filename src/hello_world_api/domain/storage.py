"""Storage locations and the (illustrative) container secret."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

PLAIN_FILE_NAME: Final[str] = "config.toml"
CONTAINER_FILE_NAME: Final[str] = "config.enc"

# Known weakness: fixed password and salt shared by every installation.
# They stay overridable via the [container] config section but are never
# generated or managed here.
DEFAULT_CONTAINER_PASSWORD: Final[str] = "ThisIsOurSuperSecretPassword"
DEFAULT_CONTAINER_SALT: Final[str] = "This is my super secret salt!"
DEFAULT_KDF_ITERATIONS: Final[int] = 1024

CONTAINER_KEY_BITS: Final[int] = 256
CONTAINER_BLOCK_BITS: Final[int] = 128


@dataclass(frozen=True, slots=True)
class StoragePaths:
    """Plain and encrypted document locations, fixed for a store's lifetime.

    Example:
        >>> paths = StoragePaths.from_directory("/tmp/demo")
        >>> paths.plain_file.as_posix(), paths.container.as_posix()
        ('/tmp/demo/config.toml', '/tmp/demo/config.enc')
    """

    plain_file: Path
    container: Path

    @classmethod
    def from_directory(cls, directory: str | Path) -> StoragePaths:
        base = Path(directory)
        return cls(plain_file=base / PLAIN_FILE_NAME, container=base / CONTAINER_FILE_NAME)


@dataclass(frozen=True, slots=True)
class ContainerSecret:
    """Password-based key material for the encrypted container.

    The salt must be at least 8 bytes once encoded.

    Example:
        >>> secret = ContainerSecret()
        >>> secret.key_bytes, secret.iv_bytes
        (32, 16)
    """

    password: str = DEFAULT_CONTAINER_PASSWORD
    salt: str = DEFAULT_CONTAINER_SALT
    iterations: int = DEFAULT_KDF_ITERATIONS
    key_bits: int = CONTAINER_KEY_BITS
    block_bits: int = CONTAINER_BLOCK_BITS

    @property
    def key_bytes(self) -> int:
        return self.key_bits // 8

    @property
    def iv_bytes(self) -> int:
        return self.block_bits // 8


__all__ = [
    "CONTAINER_BLOCK_BITS",
    "CONTAINER_FILE_NAME",
    "CONTAINER_KEY_BITS",
    "DEFAULT_CONTAINER_PASSWORD",
    "DEFAULT_CONTAINER_SALT",
    "DEFAULT_KDF_ITERATIONS",
    "PLAIN_FILE_NAME",
    "ContainerSecret",
    "StoragePaths",
]
