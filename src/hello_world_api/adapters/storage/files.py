"""Filesystem access for stored documents."""

from __future__ import annotations

from pathlib import Path


def write_bytes(path: Path, payload: bytes) -> None:
    """Create or overwrite ``path`` with ``payload``.

    The parent directory must already exist; it is never created here so that
    a wrong base directory surfaces as a ``FileNotFoundError``.
    """
    path.write_bytes(payload)


def default_storage_directory() -> Path:
    """Return ``~/Desktop``, the well-known location documents land in by default."""
    return Path.home() / "Desktop"


__all__ = ["default_storage_directory", "write_bytes"]
