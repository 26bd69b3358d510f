"""Metadata and greeting commands.

Contents:
    * :func:`cli_info` - Display package metadata.
    * :func:`cli_hello` - Print a timestamped greeting, optionally RSA-encrypted.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from hello_world_api import __init__conf__
from hello_world_api.domain.behaviors import CANONICAL_GREETING

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import exit_on_recorded_failures, open_store

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details.

    Example:
        >>> from click.testing import CliRunner
        >>> result = CliRunner().invoke(cli_info)
        >>> result.exit_code == 0
        True
    """
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Displaying package information")
        __init__conf__.print_info()


@click.command("hello", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--message", "-m", type=str, default=CANONICAL_GREETING, show_default=True, help="Text to print")
@click.option(
    "--encrypt/--no-encrypt",
    default=False,
    help="Print the RSA-encrypted, base64-encoded message instead of the plain text",
)
@click.pass_context
def cli_hello(ctx: click.Context, message: str, encrypt: bool) -> None:
    r"""Print a greeting as a timestamped ``[+]:`` line.

    With ``--encrypt`` the text is encrypted under a throw-away RSA key and
    printed as base64; nobody can decrypt it afterwards.

    \b
    Exit codes:
    - 22: message too long to encrypt
    - 5:  console not writable
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-hello", extra={"command": "hello", "encrypt": encrypt}):
        logger.info("Executing hello command", extra={"length": len(message)})
        store = open_store(cli_ctx)
        store.print_greeting(message, encrypt)
        exit_on_recorded_failures(store)


__all__ = ["cli_hello", "cli_info"]
