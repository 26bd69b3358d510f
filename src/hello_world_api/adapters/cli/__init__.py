"""CLI package providing the ``hello-world-api`` command-line interface.

Contents:
    * Click context helpers and traceback state management from :mod:`.context`
    * Exit codes from :mod:`.exit_codes`
    * Root command group from :mod:`.root`
    * Entry point from :mod:`.main`
    * Command functions from :mod:`.commands`
"""

from __future__ import annotations

from .commands import cli_config, cli_demo, cli_hello, cli_info, cli_store
from .context import (
    CLIContext,
    apply_traceback_preferences,
    get_cli_context,
    restore_traceback_state,
    snapshot_traceback_state,
    store_cli_context,
)
from .exit_codes import ExitCode, exit_code_for
from .main import main
from .root import cli

__all__ = [
    # Exit codes
    "ExitCode",
    "exit_code_for",
    # Traceback management
    "apply_traceback_preferences",
    "restore_traceback_state",
    "snapshot_traceback_state",
    # Context helpers
    "CLIContext",
    "get_cli_context",
    "store_cli_context",
    # Root command
    "cli",
    # Entry point
    "main",
    # Commands
    "cli_config",
    "cli_demo",
    "cli_hello",
    "cli_info",
    "cli_store",
]
