"""CLI command implementations registered on the root group.

Contents:
    * Info and greeting commands from :mod:`.info`
    * Storage command from :mod:`.store`
    * Demo command from :mod:`.demo`
    * Config display from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .demo import cli_demo
from .info import cli_hello, cli_info
from .store import cli_store

__all__ = [
    "cli_config",
    "cli_demo",
    "cli_hello",
    "cli_info",
    "cli_store",
]
