"""Storage adapter - document rendering and file writing.

Contents:
    * :mod:`.document` - TOML rendering via rtoml
    * :mod:`.files` - File writer and default directory
"""

from __future__ import annotations

from .document import render_document
from .files import default_storage_directory, write_bytes

__all__ = ["default_storage_directory", "render_document", "write_bytes"]
