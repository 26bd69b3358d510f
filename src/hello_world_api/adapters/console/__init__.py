"""Console adapter - Rich styled output.

Contents:
    * :mod:`.styled_writer` - StyledWriter and its factory
"""

from __future__ import annotations

from .styled_writer import DEFAULT_TIMESTAMP_FORMAT, StyledWriter, create_writer

__all__ = ["DEFAULT_TIMESTAMP_FORMAT", "StyledWriter", "create_writer"]
