"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.cli` - rich-click command-line interface
    * :mod:`.config` - Layered configuration loading, overrides, settings, display
    * :mod:`.console` - Rich console writer
    * :mod:`.crypto` - RSA greeting cipher and AES container cipher
    * :mod:`.logging` - lib_log_rich runtime setup
    * :mod:`.memory` - In-memory test doubles
    * :mod:`.storage` - Document rendering and file writing
"""

from __future__ import annotations

__all__: list[str] = []
