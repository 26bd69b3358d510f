"""In-memory file storage for testing.

:class:`FileSpy` replaces the filesystem writer. Only paths directly inside
``directory`` accept writes; like the production writer it never creates
missing parents.
"""

from __future__ import annotations

import tempfile
from dataclasses import dataclass, field
from pathlib import Path


def _default_directory() -> Path:
    return Path(tempfile.gettempdir()) / "hello_world_api"


def _empty_files() -> dict[Path, bytes]:
    return {}


@dataclass
class FileSpy:
    """Capture written files in ``files`` keyed by path.

    Example:
        >>> spy = FileSpy()
        >>> spy.write_bytes(spy.directory / "config.toml", b"data")
        >>> spy.files[spy.directory / "config.toml"]
        b'data'
        >>> spy.write_bytes(Path("/missing/config.toml"), b"x")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        FileNotFoundError: /missing
    """

    directory: Path = field(default_factory=_default_directory)
    files: dict[Path, bytes] = field(default_factory=_empty_files)
    raise_exception: BaseException | None = None

    def write_bytes(self, path: Path, payload: bytes) -> None:
        if self.raise_exception is not None:
            raise self.raise_exception
        if path.parent != self.directory:
            raise FileNotFoundError(2, "No such file or directory", str(path.parent))
        self.files[path] = payload

    def default_storage_directory(self) -> Path:
        return self.directory


__all__ = ["FileSpy"]
