"""Helpers shared by the commands that drive a :class:`GreetingStore`.

Contents:
    * :func:`open_store` - Build a store from the CLI context or exit with CONFIG_ERROR.
    * :func:`exit_on_recorded_failures` - Exit with the code of the last recorded failure.
"""

from __future__ import annotations

import logging
from pathlib import Path

import rich_click as click

from hello_world_api.application.greeting_store import GreetingStore
from hello_world_api.domain.errors import ConfigurationError

from ..context import CLIContext
from ..exit_codes import ExitCode, exit_code_for

logger = logging.getLogger(__name__)


def open_store(cli_ctx: CLIContext, directory: Path | None = None) -> GreetingStore:
    """Parse the store settings from the loaded config and build a store.

    Raises:
        SystemExit: ``ExitCode.CONFIG_ERROR`` when a section is invalid.
    """
    try:
        settings = cli_ctx.services.load_store_settings(cli_ctx.config)
    except ConfigurationError as exc:
        logger.error("Invalid store configuration", extra={"error": str(exc)})
        click.echo(f"\nError: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc
    return cli_ctx.services.create_greeting_store(directory, settings=settings)


def exit_on_recorded_failures(store: GreetingStore) -> None:
    """Raise ``SystemExit`` with the mapped code when ``store`` recorded a failure."""
    last = store.errors.last()
    if last is None:
        return
    raise SystemExit(exit_code_for(last.kind))


__all__ = ["exit_on_recorded_failures", "open_store"]
